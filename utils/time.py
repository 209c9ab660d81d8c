from datetime import datetime, timezone


def parse_iso_utc(ts: str | None) -> datetime | None:
    """Parse a CoinMarketCap ISO-8601 timestamp (e.g. '2024-01-01T00:00:00.000Z').

    Naive values are taken as UTC. Returns None for empty or unparseable input.
    """
    if not ts:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(ts)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
