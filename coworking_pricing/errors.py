"""Error taxonomy of the pricing engine.

Validation fails on a malformed "HH:MM" string, a duration outside the
workspace bounds, an extension that does not extend, and check-out
timestamps earlier than the check-in. Pricing itself is total.
"""

from __future__ import annotations

from typing import Optional


class PricingError(ValueError):
    """Base class for engine errors (HTTP callers map these to 400)."""


class InvalidTimeFormat(PricingError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid time format {value!r}: expected HH:MM")


class DurationOutOfRange(PricingError):
    BELOW_MINIMUM = "below minimum"
    ABOVE_MAXIMUM = "above maximum"
    NOT_FINITE = "not finite"

    def __init__(
        self,
        duration: float,
        reason: str,
        *,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        message: Optional[str] = None,
    ):
        self.duration = duration
        self.reason = reason
        self.minimum = minimum
        self.maximum = maximum
        if message is None:
            if reason == self.BELOW_MINIMUM:
                message = f"Minimum booking duration is {minimum:g} hours"
            elif reason == self.ABOVE_MAXIMUM:
                message = f"Maximum booking duration is {maximum:g} hours"
            elif reason == self.NOT_FINITE:
                message = f"Booking duration must be a finite number of hours, got {duration!r}"
            else:
                message = reason
        self.message = message
        super().__init__(message)


class InvalidExtension(PricingError):
    """New end time does not extend the booking."""


class InvalidUsageWindow(PricingError):
    """Check-out timestamp earlier than the check-in."""

    def __init__(self, check_in: object, check_out: object):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(f"Check-out {check_out} is before check-in {check_in}")


__all__ = ["PricingError", "InvalidTimeFormat", "DurationOutOfRange", "InvalidExtension", "InvalidUsageWindow"]
