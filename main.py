import logging
import sys

from app.bootstrap import build_client
from app.config import ConfigError
from data.models.result import ApiSuccess

# logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

try:
    client = build_client()
except ConfigError as e:
    logging.error(f"Error: {e}")
    sys.exit(1)

with client:
    result = client.cryptocurrency.listings_latest(limit=10, convert="USD")

if not isinstance(result, ApiSuccess):
    logging.error(f"Listings request failed ({result.kind.value}, HTTP {result.status_code}): {result.error_message}")
    sys.exit(1)

for entry in result.data:
    price = entry.price("USD")
    price_str = f"{price:,.2f}" if price is not None else "n/a"
    logging.info(f"#{entry.cmc_rank} {entry.symbol} ({entry.name}) - USD {price_str}")

if result.api_status:
    logging.info(f"Credits used: {result.api_status.credit_count}")
