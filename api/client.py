"""
API Client module providing centralized access to CoinMarketCap Pro API endpoints.
"""

from api.cryptocurrency import CryptocurrencyAPI
from api.handle_requests import RequestHandler
from app.config import DEFAULT_API_URL, ApiConfig


class ApiClient:
    """Root client that centralizes sub-APIs and holds the credential and HTTP session."""

    def __init__(self, api_key: str, api_url: str = DEFAULT_API_URL, timeout: float | None = None):
        self.api_key = api_key
        self.http = RequestHandler(api_url, timeout=timeout)
        self.cryptocurrency = CryptocurrencyAPI(self)

    @classmethod
    def from_config(cls, config: ApiConfig) -> "ApiClient":
        return cls(config.api_key, api_url=config.api_url, timeout=config.timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
