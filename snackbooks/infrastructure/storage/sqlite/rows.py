"""Column value parsing shared by the SQLite stores."""

from datetime import UTC, date, datetime


def parse_datetime(value: str | None) -> datetime:
    """ISO timestamp column to an aware datetime; now() when unreadable."""
    if value:
        try:
            parsed = datetime.fromisoformat(value)
        except (ValueError, TypeError):
            return datetime.now(UTC)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed
    return datetime.now(UTC)


def parse_date(value: str | None) -> date:
    """ISO date column to a date; today when unreadable."""
    if value:
        try:
            return date.fromisoformat(value[:10])
        except (ValueError, TypeError):
            pass
    return date.today()


def sql_limit(limit: int | None) -> int:
    """LIMIT parameter; -1 is SQLite for no limit."""
    return -1 if limit is None else max(limit, 0)
