from .calculator import (
    QuoteRequest,
    price_day_pass,
    price_hourly_desk,
    price_meeting_room,
    price_meeting_room_for,
    quote_booking,
)
from .credits import consume, remaining_after
from .duration import (
    elapsed_duration,
    parse_time_to_minutes,
    scheduled_duration,
    try_elapsed_duration,
    try_scheduled_duration,
    validate_duration,
    validate_workspace_duration,
)
from .extension import ExtensionQuote, quote_extension
from .rates import RateResolution, default_rate_card, membership_covers, membership_quote, resolve_rate
from .reconcile import cost_reconciliation, estimate_current_cost, reconcile_usage, usage_record_from_booking

__all__ = [
    "QuoteRequest",
    "quote_booking",
    "price_hourly_desk",
    "price_meeting_room",
    "price_meeting_room_for",
    "price_day_pass",
    "consume",
    "remaining_after",
    "parse_time_to_minutes",
    "scheduled_duration",
    "try_scheduled_duration",
    "elapsed_duration",
    "try_elapsed_duration",
    "validate_duration",
    "validate_workspace_duration",
    "ExtensionQuote",
    "quote_extension",
    "RateResolution",
    "default_rate_card",
    "membership_covers",
    "membership_quote",
    "resolve_rate",
    "reconcile_usage",
    "usage_record_from_booking",
    "cost_reconciliation",
    "estimate_current_cost",
]
