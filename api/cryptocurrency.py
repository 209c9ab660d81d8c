"""
Cryptocurrency API module: id map, metadata and latest listings.
"""
from typing import TYPE_CHECKING, Any

from data.models.cryptocurrency import CryptocurrencyInfo, CryptocurrencyMapEntry, ListingEntry, info_by_key
from data.models.params import CryptocurrencyInfoParams, CryptocurrencyMapParams, ListingsLatestParams, QueryParams
from data.models.result import ApiResult

if TYPE_CHECKING:
    from api.client import ApiClient


def _resolve(params: QueryParams | None, kwargs: dict[str, Any], params_type: type) -> QueryParams:
    if params is not None and kwargs:
        raise TypeError("pass either a params object or keyword arguments, not both")
    if params is None:
        return params_type(**kwargs)
    return params


def _map_entries(data: Any) -> list[CryptocurrencyMapEntry]:
    if not isinstance(data, list):
        return []
    return [CryptocurrencyMapEntry.from_dict(d) for d in data if isinstance(d, dict)]


def _listing_entries(data: Any) -> list[ListingEntry]:
    if not isinstance(data, list):
        return []
    return [ListingEntry.from_dict(d) for d in data if isinstance(d, dict)]


class CryptocurrencyAPI:
    """Cryptocurrency endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def map(self, params: CryptocurrencyMapParams | None = None, **kwargs) -> ApiResult[list[CryptocurrencyMapEntry]]:
        """
        Fetch the id map of cryptocurrencies (GET /v1/cryptocurrency/map).
        Returns the entries from the 'data' array.
        """
        query = _resolve(params, kwargs, CryptocurrencyMapParams)
        return self.client.http.get_json(
            "v1/cryptocurrency/map",
            self.client.api_key,
            params=query.to_params(),
            parse=_map_entries,
        )

    def info(
        self, params: CryptocurrencyInfoParams | None = None, **kwargs
    ) -> ApiResult[dict[str, list[CryptocurrencyInfo]]]:
        """
        Fetch static metadata for one or more cryptocurrencies (GET /v2/cryptocurrency/info).
        Returns the 'data' object keyed by the id, slug or symbol that was queried.
        """
        query = _resolve(params, kwargs, CryptocurrencyInfoParams)
        return self.client.http.get_json(
            "v2/cryptocurrency/info",
            self.client.api_key,
            params=query.to_params(),
            parse=info_by_key,
        )

    def listings_latest(
        self, params: ListingsLatestParams | None = None, **kwargs
    ) -> ApiResult[list[ListingEntry]]:
        """Fetch a ranked page of active cryptocurrencies with market data (GET /v1/cryptocurrency/listings/latest)."""
        query = _resolve(params, kwargs, ListingsLatestParams)
        return self.client.http.get_json(
            "v1/cryptocurrency/listings/latest",
            self.client.api_key,
            params=query.to_params(),
            parse=_listing_entries,
        )
