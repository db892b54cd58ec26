"""Duration helpers: wall-clock "HH:MM" spans and elapsed timestamps.

Two ways to measure a booking, deliberately different:

- ``scheduled_duration`` works on bare times of day. A booking ending
  "earlier" than it starts is read as crossing midnight, so 23:00 -> 02:00
  is 3 hours.
- ``elapsed_duration`` works on absolute timestamps (check-in/check-out).
  The date is already encoded, so there is NO wraparound: a check-out
  before the check-in yields a negative span. ``try_elapsed_duration``
  turns that case into Err(InvalidUsageWindow) for checkout billing.

Do not unify the two. The booking form relies on the wrap and the
reconciler relies on its absence.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Union

from ..charge_models.types import WorkspaceInfo
from ..errors import DurationOutOfRange, InvalidTimeFormat, InvalidUsageWindow
from ..result import Err, Ok, Result

_LOGGER = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")
MINUTES_PER_DAY = 24 * 60

Timestamp = Union[datetime, str]


def parse_time_to_minutes(time: str) -> int:
    """Parse "HH:MM" into minutes since midnight."""
    if not isinstance(time, str):
        raise InvalidTimeFormat(time)
    m = _TIME_RE.match(time.strip())
    if not m:
        raise InvalidTimeFormat(time)
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(time)
    return hours * 60 + minutes


def scheduled_duration(start: str, end: str) -> float:
    """Hours between two times of day, wrapping past midnight."""
    minutes = parse_time_to_minutes(end) - parse_time_to_minutes(start)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes / 60


def try_scheduled_duration(start: str, end: str) -> Result:
    try:
        return Ok(scheduled_duration(start, end))
    except InvalidTimeFormat as ex:
        return Err(ex)


def _to_datetime(value: Timestamp) -> datetime:
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        # fromisoformat only accepts a trailing "Z" from 3.11 on
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    # naive timestamps are UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def elapsed_duration(start: Timestamp, end: Timestamp) -> float:
    """Hours between two absolute timestamps, rounded to 2 decimals."""
    delta = _to_datetime(end) - _to_datetime(start)
    return round(delta.total_seconds() / 3600, 2)


def try_elapsed_duration(check_in: Timestamp, check_out: Timestamp) -> Result:
    """Elapsed hours, or Err(InvalidUsageWindow) when check-out precedes check-in."""
    hours = elapsed_duration(check_in, check_out)
    if hours < 0:
        return Err(InvalidUsageWindow(check_in, check_out))
    return Ok(hours)


def validate_duration(duration: float, minimum: float, maximum: float) -> Result:
    if not math.isfinite(duration):
        _LOGGER.debug("Duration %s is not finite", duration)
        return Err(
            DurationOutOfRange(duration, DurationOutOfRange.NOT_FINITE, minimum=minimum, maximum=maximum)
        )
    if duration < minimum:
        _LOGGER.debug("Duration %s below minimum %s", duration, minimum)
        return Err(
            DurationOutOfRange(duration, DurationOutOfRange.BELOW_MINIMUM, minimum=minimum, maximum=maximum)
        )
    if duration > maximum:
        _LOGGER.debug("Duration %s above maximum %s", duration, maximum)
        return Err(
            DurationOutOfRange(duration, DurationOutOfRange.ABOVE_MAXIMUM, minimum=minimum, maximum=maximum)
        )
    return Ok(duration)


def validate_workspace_duration(workspace: WorkspaceInfo, duration: float) -> Result:
    return validate_duration(duration, workspace.min_duration, workspace.max_duration)


__all__ = [
    "parse_time_to_minutes",
    "scheduled_duration",
    "try_scheduled_duration",
    "elapsed_duration",
    "try_elapsed_duration",
    "validate_duration",
    "validate_workspace_duration",
]
