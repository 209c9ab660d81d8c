"""Response builders shared by the test modules."""

import json
from typing import Any

import requests

TEST_API_KEY = "test-cmc-key"


def make_response(status_code: int, body: Any = None, *, text: str | None = None, reason: str = "") -> requests.Response:
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    if text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


def status_block(**overrides) -> dict[str, Any]:
    block = {
        "timestamp": "2024-03-01T12:00:00.000Z",
        "error_code": 0,
        "error_message": None,
        "elapsed": 10,
        "credit_count": 1,
        "notice": None,
    }
    block.update(overrides)
    return block

