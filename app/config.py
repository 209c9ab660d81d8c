import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "https://pro-api.coinmarketcap.com"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ApiConfig:
    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout: float | None = None

    @staticmethod
    def from_env(dotenv: bool = True) -> "ApiConfig":
        """Read CMC_PRO_API_KEY (required), CMC_API_URL and CMC_TIMEOUT_SECONDS once, at start-up."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        api_key = os.getenv("CMC_PRO_API_KEY")
        if not api_key:
            raise ConfigError("CMC_PRO_API_KEY not found in environment; set it in your .env file or environment.")

        timeout_raw = os.getenv("CMC_TIMEOUT_SECONDS")
        timeout = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ConfigError(f"CMC_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}") from None
            if timeout <= 0:
                raise ConfigError(f"CMC_TIMEOUT_SECONDS must be positive, got {timeout_raw!r}")

        return ApiConfig(
            api_key=api_key,
            api_url=os.getenv("CMC_API_URL") or DEFAULT_API_URL,
            timeout=timeout,
        )
