"""
HTTP request handler for the CoinMarketCap Pro API.
Serializes query parameters, attaches the API key header and turns every
outcome (2xx, provider error, transport error) into an ApiResult value.
"""
import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

import requests

from data.enums import FailureKind
from data.models.result import ApiFailure, ApiResult, ApiSuccess
from data.models.status import StatusBlock

API_KEY_HEADER = "X-CMC_PRO_API_KEY"

T = TypeVar("T")


def encode_value(value: Any) -> str:
    """Render one query value the way the provider expects it."""
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(encode_value(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return ",".join(sorted(encode_value(v) for v in value))
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop unset (None) entries and encode the rest; insertion order is kept."""
    if not params:
        return {}
    return {key: encode_value(value) for key, value in params.items() if value is not None}


class RequestHandler:
    def __init__(self, base_url: str, timeout: float | None = None, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def auth_headers(self, api_key: str) -> dict:
        return {API_KEY_HEADER: api_key, "Accept": "application/json"}

    def get_json(
        self,
        path: str,
        api_key: str,
        params: Mapping[str, Any] | None = None,
        parse: Callable[[Any], T] | None = None,
    ) -> ApiResult[T]:
        """
        Single GET with no retries.
        path: path relative to base_url (no leading slash)
        parse: turns body["data"] into the endpoint's typed data; identity when omitted
        """
        url = f"{self.base_url}/{path}"
        query = encode_query(params)
        logging.debug(f"GET /{path} params={query}")

        try:
            resp = self.session.get(url, headers=self.auth_headers(api_key), params=query, timeout=self.timeout)
        except requests.RequestException as e:
            logging.warning(f"GET /{path} failed before a response was received: {e}")
            return ApiFailure(kind=FailureKind.TRANSPORT, message=str(e))

        try:
            body = resp.json()
        except ValueError:
            body = None

        api_status = StatusBlock.from_dict(body.get("status")) if isinstance(body, dict) else None

        if not resp.ok:
            message = api_status.error_message if api_status and api_status.error_message else resp.reason or ""
            logging.warning(f"GET /{path} -> HTTP {resp.status_code}: {message}")
            return ApiFailure(
                kind=FailureKind.HTTP,
                status_code=resp.status_code,
                body=body,
                api_status=api_status,
                message=message,
            )

        if not isinstance(body, dict):
            logging.warning(f"GET /{path} -> HTTP {resp.status_code} with a non-JSON-object body")
            return ApiFailure(
                kind=FailureKind.DECODE,
                status_code=resp.status_code,
                body=body if body is not None else resp.text,
                message="response body is not a JSON object",
            )

        raw_data = body.get("data")
        try:
            data = parse(raw_data) if parse else raw_data
        except (TypeError, ValueError, AttributeError) as e:
            logging.warning(f"GET /{path} -> HTTP {resp.status_code} with a 'data' member that could not be parsed: {e}")
            return ApiFailure(
                kind=FailureKind.DECODE,
                status_code=resp.status_code,
                body=body,
                api_status=api_status,
                message=f"unexpected 'data' shape: {e}",
            )
        if api_status:
            logging.debug(
                f"GET /{path} -> HTTP {resp.status_code} elapsed={api_status.elapsed}ms credits={api_status.credit_count}"
            )
        return ApiSuccess(data=data, status=resp.status_code, api_status=api_status, raw=body)
