import logging

from api.client import ApiClient
from app.config import ApiConfig


def build_client(config: ApiConfig | None = None) -> ApiClient:
    """Create the one ApiClient for this process; reads the environment only when no config is given."""
    config = config or ApiConfig.from_env()
    client = ApiClient.from_config(config)
    logging.info(f"CoinMarketCap client ready: {config.api_url}")
    return client
