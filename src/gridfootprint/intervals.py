"""Interval key normalisation.

All three series (meter consumption, grid intensity, generation mix) are
joined on an interval key: the interval start in UTC, truncated to the minute
and formatted as ``YYYY-MM-DDTHH:MM``. Sources label timestamps with
different widths (``2024-01-01T00:00Z``, ``2024-01-01T00:00:00.000Z``), so
keys are built from parsed timestamps rather than string prefixes.
"""

from datetime import UTC, datetime

import pandas as pd

from .exceptions import IntervalKeyError

KEY_FORMAT = "%Y-%m-%dT%H:%M"


def parse_timestamp(value: str | datetime | pd.Timestamp) -> datetime:
    """Parse an ISO-8601 timestamp into a UTC-aware datetime.

    Naive values are taken to be UTC already.
    """
    if isinstance(value, str):
        value = value.strip()
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise IntervalKeyError(f"Unparseable timestamp {value!r}: {e}") from e
    if pd.isna(ts):
        raise IntervalKeyError(f"Unparseable timestamp {value!r}")

    if ts.tz is None:
        ts = ts.tz_localize(UTC)
    else:
        ts = ts.tz_convert(UTC)
    return ts.to_pydatetime()


def interval_key(value: str | datetime | pd.Timestamp) -> str:
    """Return the minute-precision UTC join key for a timestamp.

    Seconds and sub-seconds are floored away, never rounded.
    """
    ts = parse_timestamp(value)
    return ts.replace(second=0, microsecond=0).strftime(KEY_FORMAT)
