"""Booking price calculation.

Three algorithms, one per resource kind (implemented by the charge models
in ``charge_models``), plus ``quote_booking`` which runs the whole pipeline:

    validate duration -> resolve rate / membership -> consume credits -> price

The ``price_*`` functions never raise; duration bounds are the caller's
precondition (``quote_booking`` enforces them and returns an Err instead).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..charge_models.day_pass import DayPassChargeModel
from ..charge_models.hot_desk import HotDeskChargeModel
from ..charge_models.meeting_room import MeetingRoomChargeModel
from ..charge_models.registry import ChargeModelRegistry, build_default_registry
from ..charge_models.types import (
    BookingQuote,
    CreditConsumption,
    MembershipInfo,
    PricingContext,
    RateCard,
    ResourceKind,
    WorkspaceInfo,
)
from ..result import Err, Ok, Result
from .credits import consume
from .duration import validate_workspace_duration
from .rates import membership_covers, membership_quote, resolve_rate

_LOGGER = logging.getLogger(__name__)

MEETING_ROOM_CREDIT_TYPE = "meeting-room"

_HOT_DESK = HotDeskChargeModel()
_MEETING_ROOM = MeetingRoomChargeModel()
_DAY_PASS = DayPassChargeModel()


def price_hourly_desk(
    duration: float,
    nft_holder: bool = False,
    rate_card: Optional[RateCard] = None,
    membership: Optional[MembershipInfo] = None,
) -> BookingQuote:
    card = rate_card or RateCard()
    if membership_covers(ResourceKind.HOT_DESK, membership):
        return membership_quote(ResourceKind.HOT_DESK, card)
    ctx = PricingContext(duration=duration, base_rate=card.hot_desk_hourly, nft_holder=nft_holder, rate_card=card)
    return _HOT_DESK.price(ctx)


def price_meeting_room(
    rate: float,
    consumption: CreditConsumption,
    nft_holder: bool = False,
    rate_card: Optional[RateCard] = None,
) -> BookingQuote:
    ctx = PricingContext(
        duration=consumption.duration,
        base_rate=rate,
        nft_holder=nft_holder,
        rate_card=rate_card or RateCard(),
        consumption=consumption,
    )
    return _MEETING_ROOM.price(ctx)


def price_meeting_room_for(
    workspace: WorkspaceInfo,
    duration: float,
    available_credits: float,
    nft_holder: bool = False,
    rate_card: Optional[RateCard] = None,
) -> BookingQuote:
    consumption = consume(duration, available_credits)
    return price_meeting_room(workspace.base_price_hourly, consumption, nft_holder, rate_card)


def price_day_pass(nft_holder: bool = False, rate_card: Optional[RateCard] = None) -> BookingQuote:
    card = rate_card or RateCard()
    ctx = PricingContext(duration=0.0, base_rate=card.day_pass_flat, nft_holder=nft_holder, rate_card=card)
    return _DAY_PASS.price(ctx)


@dataclass(frozen=True)
class QuoteRequest:
    workspace: WorkspaceInfo
    duration: float
    membership: Optional[MembershipInfo] = None
    nft_holder: bool = False
    credit_type: str = MEETING_ROOM_CREDIT_TYPE


def quote_booking(
    request: QuoteRequest,
    rate_card: Optional[RateCard] = None,
    registry: Optional[ChargeModelRegistry] = None,
) -> Result:
    """Price a booking end to end. Returns Ok(BookingQuote) or Err(DurationOutOfRange)."""
    card = rate_card or RateCard()
    reg = registry or build_default_registry()
    workspace = request.workspace

    validated = validate_workspace_duration(workspace, request.duration)
    if isinstance(validated, Err):
        return validated

    resolution = resolve_rate(workspace.resource_kind, request.membership, workspace, card)
    if resolution.covered_by_membership:
        _LOGGER.debug("Booking of %s covered by membership", resolution.kind.value)
        return Ok(membership_quote(resolution.kind, card))

    model = reg.get(resolution.kind)
    if model is None:
        raise ValueError(f"No charge model registered for {resolution.kind.value}")

    consumption = None
    if model.uses_credits():
        membership = request.membership or MembershipInfo()
        consumption = consume(request.duration, membership.credits_for(request.credit_type))

    ctx = PricingContext(
        duration=request.duration,
        base_rate=resolution.base_rate,
        nft_holder=request.nft_holder,
        rate_card=card,
        consumption=consumption,
    )
    quote = model.price(ctx)
    _LOGGER.debug("Quoted %s for %sh: total=%.2f (%s)", resolution.kind.value, request.duration, quote.total_price, quote.payment_method.value)
    return Ok(quote)


__all__ = [
    "MEETING_ROOM_CREDIT_TYPE",
    "QuoteRequest",
    "price_hourly_desk",
    "price_meeting_room",
    "price_meeting_room_for",
    "price_day_pass",
    "quote_booking",
]
