from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .. import config as _config


class ResourceKind(str, Enum):
    HOT_DESK = "hot-desk"
    MEETING_ROOM = "meeting-room"
    DAY_PASS = "day-pass"


class PaymentMethod(str, Enum):
    CARD = "card"
    CREDITS = "credits"
    MEMBERSHIP = "membership"


@dataclass(frozen=True)
class BookingQuote:
    """Pricing breakdown produced at booking time.

    The monetary fields are what a caller copies into the booking row.
    For meeting rooms ``subtotal`` equals ``overage_charge``.
    """

    resource_kind: ResourceKind
    base_price: float
    subtotal: float = 0.0
    discount_amount: float = 0.0
    nft_discount_applied: bool = False
    credits_used: float = 0.0
    credits_overage_hours: float = 0.0
    overage_charge: float = 0.0
    processing_fee: float = 0.0
    total_price: float = 0.0
    payment_method: PaymentMethod = PaymentMethod.CARD

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["resource_kind"] = self.resource_kind.value
        out["payment_method"] = self.payment_method.value
        return out


@dataclass(frozen=True)
class CreditBalance:
    credit_type: str
    available_hours: float


@dataclass(frozen=True)
class UsageRecord:
    booked_hours: float
    actual_hours: float
    subtotal_paid: float
    processing_fee_paid: float
    nft_discount_applied: bool = False

    @property
    def total_paid(self) -> float:
        return self.subtotal_paid + self.processing_fee_paid


@dataclass(frozen=True)
class ReconciliationResult:
    final_charge: float
    refund_amount: float
    overage_charge: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MembershipInfo:
    """What the membership/credit provider knows about a user."""

    has_active_plan: bool = False
    plan_includes_hot_desk: bool = False
    available_credits_by_type: Dict[str, float] = field(default_factory=dict)

    def credits_for(self, credit_type: str) -> CreditBalance:
        hours = float(self.available_credits_by_type.get(credit_type, 0.0) or 0.0)
        return CreditBalance(credit_type=credit_type, available_hours=hours)


@dataclass(frozen=True)
class WorkspaceInfo:
    resource_kind: ResourceKind
    base_price_hourly: float = 0.0
    min_duration: float = 1.0
    max_duration: float = 8.0


@dataclass(frozen=True)
class RateCard:
    """Prices the engine works with. Defaults are read from config.py when constructed."""

    hot_desk_hourly: float = field(default_factory=lambda: _config.HOT_DESK_HOURLY_RATE)
    day_pass_flat: float = field(default_factory=lambda: _config.DAY_PASS_PRICE)
    processing_fee: float = field(default_factory=lambda: _config.PROCESSING_FEE)
    nft_discount_rate: float = field(default_factory=lambda: _config.NFT_DISCOUNT_RATE)
    cafe_discount_rate: float = field(default_factory=lambda: _config.CAFE_DISCOUNT_RATE)
    currency: str = field(default_factory=lambda: _config.DEFAULT_CURRENCY)

    @property
    def nft_hot_desk_hourly(self) -> float:
        return self.hot_desk_hourly * (1 - self.nft_discount_rate)


@dataclass(frozen=True)
class CreditConsumption:
    credits_used: float
    overage_hours: float

    @property
    def duration(self) -> float:
        return self.credits_used + self.overage_hours


@dataclass(frozen=True)
class PricingContext:
    """Everything a charge model needs to price one booking."""

    duration: float
    base_rate: float
    nft_holder: bool = False
    rate_card: RateCard = field(default_factory=RateCard)
    consumption: Optional[CreditConsumption] = None
