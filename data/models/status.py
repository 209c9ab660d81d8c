from dataclasses import dataclass
from datetime import datetime
from typing import Any

from utils.time import parse_iso_utc


@dataclass
class StatusBlock:
    timestamp: str | None = None
    error_code: int = 0
    error_message: str | None = None
    elapsed: int = 0
    credit_count: int = 0
    notice: str | None = None

    @property
    def timestamp_dt(self) -> datetime | None:
        return parse_iso_utc(self.timestamp)

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "StatusBlock | None":
        if not isinstance(d, dict):
            return None
        error_code = d.get("error_code")
        try:
            error_code = int(error_code) if error_code is not None else 0
        except (TypeError, ValueError):
            error_code = 0
        return StatusBlock(
            timestamp=d.get("timestamp"),
            error_code=error_code,
            error_message=d.get("error_message"),
            elapsed=d.get("elapsed") or 0,
            credit_count=d.get("credit_count") or 0,
            notice=d.get("notice"),
        )
