"""
Tagged outcome of one endpoint call.
Callers branch on isinstance(result, ApiSuccess) / result.ok instead of sniffing shapes.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from data.enums import FailureKind
from data.models.status import StatusBlock

T = TypeVar("T")


@dataclass
class ApiSuccess(Generic[T]):
    data: T
    status: int
    api_status: StatusBlock | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass
class ApiFailure:
    kind: FailureKind
    status_code: int | None = None
    body: Any = None
    api_status: StatusBlock | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def error_code(self) -> int | None:
        return self.api_status.error_code if self.api_status else None

    @property
    def error_message(self) -> str | None:
        if self.api_status and self.api_status.error_message:
            return self.api_status.error_message
        return self.message or None


ApiResult = Union[ApiSuccess[T], ApiFailure]
