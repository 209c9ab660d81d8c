from dataclasses import dataclass, field
from typing import Any


def str_list(value: Any) -> list[str]:
    """Coerce a provider list-of-strings field; a bare string becomes a one-item list."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [v for v in value if isinstance(v, str)]
    return []


@dataclass
class Platform:
    id: int | None
    name: str | None
    symbol: str | None
    slug: str | None
    token_address: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "Platform | None":
        if not isinstance(d, dict) or not d:
            return None
        return Platform(
            id=d.get("id"),
            name=d.get("name"),
            symbol=d.get("symbol"),
            slug=d.get("slug"),
            token_address=d.get("token_address"),
        )


@dataclass
class CryptocurrencyMapEntry:
    id: int
    name: str | None
    symbol: str | None
    slug: str | None
    rank: int | None = None
    is_active: int | None = None
    status: str | None = None
    first_historical_data: str | None = None
    last_historical_data: str | None = None
    platform: Platform | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CryptocurrencyMapEntry":
        return CryptocurrencyMapEntry(
            id=d.get("id"),
            name=d.get("name"),
            symbol=d.get("symbol"),
            slug=d.get("slug"),
            rank=d.get("rank"),
            is_active=d.get("is_active"),
            status=d.get("status"),
            first_historical_data=d.get("first_historical_data"),
            last_historical_data=d.get("last_historical_data"),
            platform=Platform.from_dict(d.get("platform")),
        )


@dataclass
class CryptocurrencyUrls:
    website: list[str] = field(default_factory=list)
    technical_doc: list[str] = field(default_factory=list)
    explorer: list[str] = field(default_factory=list)
    source_code: list[str] = field(default_factory=list)
    message_board: list[str] = field(default_factory=list)
    chat: list[str] = field(default_factory=list)
    announcement: list[str] = field(default_factory=list)
    reddit: list[str] = field(default_factory=list)
    facebook: list[str] = field(default_factory=list)
    twitter: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "CryptocurrencyUrls":
        d = d if isinstance(d, dict) else {}
        return CryptocurrencyUrls(
            website=str_list(d.get("website")),
            technical_doc=str_list(d.get("technical_doc")),
            explorer=str_list(d.get("explorer")),
            source_code=str_list(d.get("source_code")),
            message_board=str_list(d.get("message_board")),
            chat=str_list(d.get("chat")),
            announcement=str_list(d.get("announcement")),
            reddit=str_list(d.get("reddit")),
            facebook=str_list(d.get("facebook")),
            twitter=str_list(d.get("twitter")),
        )


@dataclass
class CryptocurrencyInfo:
    id: int
    name: str | None
    symbol: str | None
    slug: str | None
    category: str | None = None
    logo: str | None = None
    description: str | None = None
    date_added: str | None = None
    date_launched: str | None = None
    notice: str | None = None
    status: str | None = None
    tags: list[str] = field(default_factory=list)
    platform: Platform | None = None
    urls: CryptocurrencyUrls = field(default_factory=CryptocurrencyUrls)
    infinite_supply: bool | None = None
    self_reported_circulating_supply: float | None = None
    self_reported_market_cap: float | None = None
    self_reported_tags: list[str] | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CryptocurrencyInfo":
        return CryptocurrencyInfo(
            id=d.get("id"),
            name=d.get("name"),
            symbol=d.get("symbol"),
            slug=d.get("slug"),
            category=d.get("category"),
            logo=d.get("logo"),
            description=d.get("description"),
            date_added=d.get("date_added"),
            date_launched=d.get("date_launched"),
            notice=d.get("notice"),
            status=d.get("status"),
            tags=str_list(d.get("tags")),
            platform=Platform.from_dict(d.get("platform")),
            urls=CryptocurrencyUrls.from_dict(d.get("urls")),
            infinite_supply=d.get("infinite_supply"),
            self_reported_circulating_supply=d.get("self_reported_circulating_supply"),
            self_reported_market_cap=d.get("self_reported_market_cap"),
            self_reported_tags=d.get("self_reported_tags"),
        )


def info_by_key(data: Any) -> dict[str, list[CryptocurrencyInfo]]:
    """Normalize /v2/cryptocurrency/info data.

    Keys are ids, slugs or symbols depending on the query. Symbol lookups
    return a list per key, id/slug lookups a single object.
    """
    if not isinstance(data, dict):
        return {}
    out: dict[str, list[CryptocurrencyInfo]] = {}
    for key, value in data.items():
        items = value if isinstance(value, list) else [value]
        out[str(key)] = [CryptocurrencyInfo.from_dict(v) for v in items if isinstance(v, dict)]
    return out


@dataclass
class Quote:
    price: float | None = None
    volume_24h: float | None = None
    volume_change_24h: float | None = None
    percent_change_1h: float | None = None
    percent_change_24h: float | None = None
    percent_change_7d: float | None = None
    percent_change_30d: float | None = None
    percent_change_60d: float | None = None
    percent_change_90d: float | None = None
    market_cap: float | None = None
    market_cap_dominance: float | None = None
    fully_diluted_market_cap: float | None = None
    last_updated: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "Quote":
        d = d if isinstance(d, dict) else {}
        return Quote(
            price=d.get("price"),
            volume_24h=d.get("volume_24h"),
            volume_change_24h=d.get("volume_change_24h"),
            percent_change_1h=d.get("percent_change_1h"),
            percent_change_24h=d.get("percent_change_24h"),
            percent_change_7d=d.get("percent_change_7d"),
            percent_change_30d=d.get("percent_change_30d"),
            percent_change_60d=d.get("percent_change_60d"),
            percent_change_90d=d.get("percent_change_90d"),
            market_cap=d.get("market_cap"),
            market_cap_dominance=d.get("market_cap_dominance"),
            fully_diluted_market_cap=d.get("fully_diluted_market_cap"),
            last_updated=d.get("last_updated"),
        )


@dataclass
class ListingEntry:
    id: int
    name: str | None
    symbol: str | None
    slug: str | None
    cmc_rank: int | None = None
    num_market_pairs: int | None = None
    circulating_supply: float | None = None
    total_supply: float | None = None
    max_supply: float | None = None
    infinite_supply: bool | None = None
    date_added: str | None = None
    last_updated: str | None = None
    tags: list[str] = field(default_factory=list)
    platform: Platform | None = None
    self_reported_circulating_supply: float | None = None
    self_reported_market_cap: float | None = None
    quote: dict[str, Quote] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ListingEntry":
        quote_dict = d.get("quote")
        quote_dict = quote_dict if isinstance(quote_dict, dict) else {}
        return ListingEntry(
            id=d.get("id"),
            name=d.get("name"),
            symbol=d.get("symbol"),
            slug=d.get("slug"),
            cmc_rank=d.get("cmc_rank"),
            num_market_pairs=d.get("num_market_pairs"),
            circulating_supply=d.get("circulating_supply"),
            total_supply=d.get("total_supply"),
            max_supply=d.get("max_supply"),
            infinite_supply=d.get("infinite_supply"),
            date_added=d.get("date_added"),
            last_updated=d.get("last_updated"),
            tags=str_list(d.get("tags")),
            platform=Platform.from_dict(d.get("platform")),
            self_reported_circulating_supply=d.get("self_reported_circulating_supply"),
            self_reported_market_cap=d.get("self_reported_market_cap"),
            quote={currency: Quote.from_dict(q) for currency, q in quote_dict.items()},
        )

    def price(self, currency: str = "USD") -> float | None:
        q = self.quote.get(currency)
        return q.price if q else None
