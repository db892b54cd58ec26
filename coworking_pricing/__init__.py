"""Pure pricing engine for coworking bookings: quotes before payment,
reconciliation after checkout."""

from .charge_models.types import (
    BookingQuote,
    CreditBalance,
    MembershipInfo,
    PaymentMethod,
    RateCard,
    ReconciliationResult,
    ResourceKind,
    UsageRecord,
    WorkspaceInfo,
)
from .errors import DurationOutOfRange, InvalidExtension, InvalidTimeFormat, InvalidUsageWindow, PricingError
from .pricing.calculator import QuoteRequest, quote_booking
from .pricing.reconcile import reconcile_usage
from .result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    "BookingQuote",
    "CreditBalance",
    "MembershipInfo",
    "PaymentMethod",
    "RateCard",
    "ReconciliationResult",
    "ResourceKind",
    "UsageRecord",
    "WorkspaceInfo",
    "PricingError",
    "InvalidTimeFormat",
    "DurationOutOfRange",
    "InvalidExtension",
    "InvalidUsageWindow",
    "QuoteRequest",
    "quote_booking",
    "reconcile_usage",
    "Ok",
    "Err",
    "Result",
]
