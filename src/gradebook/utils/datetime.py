"""Date-time helpers for timestamps and academic year labels."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a naive timestamp for storage."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def academic_year_label(now: datetime | None = None, start_month: int = 7) -> str:
    """Return the academic year containing ``now``, formatted like ``2026-27``.

    A year that begins in ``start_month`` runs until the month before it in the
    following calendar year.
    """

    current = now.astimezone(timezone.utc) if now and now.tzinfo else (now or datetime.now(timezone.utc))
    first_year = current.year if current.month >= start_month else current.year - 1
    return f"{first_year}-{(first_year + 1) % 100:02d}"
