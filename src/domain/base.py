from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_username(username: str) -> str:
    return username.casefold()
