from .base import BaseChargeModel, ChargeModel
from .day_pass import DayPassChargeModel
from .hot_desk import HotDeskChargeModel
from .meeting_room import MeetingRoomChargeModel
from .ratecard import RateCardDefinition, load_rate_card, parse_rate_card
from .registry import ChargeModelRegistry, build_default_registry
from .types import (
    BookingQuote,
    CreditBalance,
    CreditConsumption,
    MembershipInfo,
    PaymentMethod,
    PricingContext,
    RateCard,
    ReconciliationResult,
    ResourceKind,
    UsageRecord,
    WorkspaceInfo,
)

__all__ = [
    "BaseChargeModel",
    "ChargeModel",
    "ChargeModelRegistry",
    "build_default_registry",
    "HotDeskChargeModel",
    "MeetingRoomChargeModel",
    "DayPassChargeModel",
    "RateCardDefinition",
    "load_rate_card",
    "parse_rate_card",
    "BookingQuote",
    "CreditBalance",
    "CreditConsumption",
    "MembershipInfo",
    "PaymentMethod",
    "PricingContext",
    "RateCard",
    "ReconciliationResult",
    "ResourceKind",
    "UsageRecord",
    "WorkspaceInfo",
]
