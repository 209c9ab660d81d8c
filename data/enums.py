from enum import Enum


class ListingStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNTRACKED = "untracked"


class MapSort(Enum):
    ID = "id"
    CMC_RANK = "cmc_rank"


class MapAux(Enum):
    PLATFORM = "platform"
    FIRST_HISTORICAL_DATA = "first_historical_data"
    LAST_HISTORICAL_DATA = "last_historical_data"
    IS_ACTIVE = "is_active"
    STATUS = "status"


class InfoAux(Enum):
    URLS = "urls"
    LOGO = "logo"
    DESCRIPTION = "description"
    TAGS = "tags"
    PLATFORM = "platform"
    DATE_ADDED = "date_added"
    NOTICE = "notice"
    STATUS = "status"


class ListingsSort(Enum):
    NAME = "name"
    SYMBOL = "symbol"
    DATE_ADDED = "date_added"
    MARKET_CAP = "market_cap"
    MARKET_CAP_STRICT = "market_cap_strict"
    PRICE = "price"
    CIRCULATING_SUPPLY = "circulating_supply"
    TOTAL_SUPPLY = "total_supply"
    MAX_SUPPLY = "max_supply"
    NUM_MARKET_PAIRS = "num_market_pairs"
    VOLUME_24H = "volume_24h"
    PERCENT_CHANGE_1H = "percent_change_1h"
    PERCENT_CHANGE_24H = "percent_change_24h"
    PERCENT_CHANGE_7D = "percent_change_7d"
    MARKET_CAP_BY_TOTAL_SUPPLY_STRICT = "market_cap_by_total_supply_strict"
    VOLUME_7D = "volume_7d"
    VOLUME_30D = "volume_30d"


class SortDir(Enum):
    ASC = "asc"
    DESC = "desc"


class CryptocurrencyType(Enum):
    ALL = "all"
    COINS = "coins"
    TOKENS = "tokens"


class ListingsTag(Enum):
    ALL = "all"
    DEFI = "defi"
    FILESHARING = "filesharing"


class ListingsAux(Enum):
    NUM_MARKET_PAIRS = "num_market_pairs"
    CMC_RANK = "cmc_rank"
    DATE_ADDED = "date_added"
    TAGS = "tags"
    PLATFORM = "platform"
    MAX_SUPPLY = "max_supply"
    CIRCULATING_SUPPLY = "circulating_supply"
    TOTAL_SUPPLY = "total_supply"
    MARKET_CAP_BY_TOTAL_SUPPLY = "market_cap_by_total_supply"
    VOLUME_24H_REPORTED = "volume_24h_reported"
    VOLUME_7D = "volume_7d"
    VOLUME_7D_REPORTED = "volume_7d_reported"
    VOLUME_30D = "volume_30d"
    VOLUME_30D_REPORTED = "volume_30d_reported"
    IS_MARKET_CAP_INCLUDED_IN_CALC = "is_market_cap_included_in_calc"


class FailureKind(Enum):
    TRANSPORT = "TRANSPORT"
    HTTP = "HTTP"
    DECODE = "DECODE"
