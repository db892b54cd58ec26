"""Quote for extending a checked-in hourly booking to a later end time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..charge_models.types import BookingQuote, MembershipInfo, RateCard, WorkspaceInfo
from ..errors import InvalidExtension, InvalidTimeFormat
from ..result import Err, Ok, Result
from .calculator import price_hourly_desk
from .duration import parse_time_to_minutes, scheduled_duration, validate_workspace_duration


@dataclass(frozen=True)
class ExtensionQuote:
    new_end_time: str
    new_duration_hours: float
    additional_hours: float
    additional_quote: BookingQuote
    new_subtotal: float
    new_discount_amount: float
    new_total_price: float

    @property
    def requires_additional_payment(self) -> bool:
        return self.additional_quote.total_price > 0


def quote_extension(
    booking: Mapping[str, Any],
    new_end_time: str,
    workspace: WorkspaceInfo,
    nft_holder: bool = False,
    membership: Optional[MembershipInfo] = None,
    rate_card: Optional[RateCard] = None,
) -> Result:
    """Price the extra hours and the booking's new totals.

    ``booking`` holds the stored row: ``start_time, end_time, subtotal,
    discount_amount, total_price``. The new end time must be later on the
    same day; extensions never wrap past midnight.
    """
    start, end = booking.get("start_time"), booking.get("end_time")
    try:
        if parse_time_to_minutes(new_end_time) <= parse_time_to_minutes(end):
            return Err(InvalidExtension("New end time must be after current end time"))
        new_duration = scheduled_duration(start, new_end_time)
        additional = scheduled_duration(end, new_end_time)
    except InvalidTimeFormat as ex:
        return Err(ex)

    validated = validate_workspace_duration(workspace, new_duration)
    if isinstance(validated, Err):
        return validated

    extra = price_hourly_desk(additional, nft_holder=nft_holder, rate_card=rate_card, membership=membership)
    return Ok(
        ExtensionQuote(
            new_end_time=new_end_time,
            new_duration_hours=new_duration,
            additional_hours=additional,
            additional_quote=extra,
            new_subtotal=float(booking.get("subtotal") or 0.0) + extra.subtotal,
            new_discount_amount=float(booking.get("discount_amount") or 0.0) + extra.discount_amount,
            new_total_price=float(booking.get("total_price") or 0.0) + extra.total_price,
        )
    )


__all__ = ["ExtensionQuote", "quote_extension"]
