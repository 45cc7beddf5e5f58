"""Parsing of the Retry-After response header."""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

DEFAULT_RETRY_DELAY = 5.0


def parse_retry_after(
    value: str | None,
    default: float = DEFAULT_RETRY_DELAY,
    *,
    now: datetime | None = None,
) -> float:
    """Convert a Retry-After header value into a delay in seconds.

    The header is either a number of seconds or an HTTP-date. A date in
    the past means retry immediately. Missing or unparseable values fall
    back to ``default``; this function never raises.
    """
    if not value:
        return default

    value = value.strip()
    try:
        return float(max(int(value), 0))
    except ValueError:
        pass

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return default
    if retry_at is None:
        return default
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)

    current = now or datetime.now(UTC)
    return max((retry_at - current).total_seconds(), 0.0)
