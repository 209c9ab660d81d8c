"""
Query parameter objects for the cryptocurrency endpoints.
Every field is optional; a field left as None is not sent.
"""
from dataclasses import dataclass, fields
from typing import Any, Sequence

from data.enums import (
    CryptocurrencyType,
    InfoAux,
    ListingsAux,
    ListingsSort,
    ListingsTag,
    ListingStatus,
    MapAux,
    MapSort,
    SortDir,
)


class QueryParams:
    """Mixin turning a params dataclass into the mapping handed to the request handler."""

    def to_params(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class CryptocurrencyMapParams(QueryParams):
    """GET /v1/cryptocurrency/map

    limit is documented as 1..5000; start is 1-based.
    """

    listing_status: ListingStatus | str | Sequence[ListingStatus | str] | None = None
    start: int | None = None
    limit: int | None = None
    sort: MapSort | str | None = None
    symbol: str | Sequence[str] | None = None
    aux: Sequence[MapAux | str] | str | None = None


@dataclass
class CryptocurrencyInfoParams(QueryParams):
    """GET /v2/cryptocurrency/info

    The provider expects at least one of id, slug, symbol or address.
    """

    id: int | str | Sequence[int | str] | None = None
    slug: str | Sequence[str] | None = None
    symbol: str | Sequence[str] | None = None
    address: str | None = None
    skip_invalid: bool | None = None
    aux: Sequence[InfoAux | str] | str | None = None


@dataclass
class ListingsLatestParams(QueryParams):
    """GET /v1/cryptocurrency/listings/latest"""

    start: int | None = None
    limit: int | None = None
    price_min: float | None = None
    price_max: float | None = None
    market_cap_min: float | None = None
    market_cap_max: float | None = None
    volume_24h_min: float | None = None
    volume_24h_max: float | None = None
    circulating_supply_min: float | None = None
    circulating_supply_max: float | None = None
    percent_change_24h_min: float | None = None
    percent_change_24h_max: float | None = None
    convert: str | Sequence[str] | None = None
    convert_id: int | str | Sequence[int | str] | None = None
    sort: ListingsSort | str | None = None
    sort_dir: SortDir | str | None = None
    cryptocurrency_type: CryptocurrencyType | str | None = None
    tag: ListingsTag | str | None = None
    aux: Sequence[ListingsAux | str] | str | None = None
