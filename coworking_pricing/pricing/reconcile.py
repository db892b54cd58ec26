"""Checkout reconciliation for hourly (hot-desk style) bookings.

Compares booked vs. actually used hours and decides between a refund, an
additional overage charge, or no change. At most one of refund/overage is
non-zero.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from ..charge_models.types import RateCard, ReconciliationResult, UsageRecord
from ..result import Err, Ok, Result
from .duration import Timestamp, try_elapsed_duration

_LOGGER = logging.getLogger(__name__)


def _hours(value: float) -> str:
    return f"{value:g}"


def effective_hourly_rate(nft_holder: bool, rate_card: Optional[RateCard] = None) -> float:
    card = rate_card or RateCard()
    return card.nft_hot_desk_hourly if nft_holder else card.hot_desk_hourly


def reconcile_usage(record: UsageRecord, rate_card: Optional[RateCard] = None) -> ReconciliationResult:
    card = rate_card or RateCard()
    rate = effective_hourly_rate(record.nft_discount_applied, card)
    total_paid = record.total_paid
    booked, actual = record.booked_hours, record.actual_hours

    if actual < booked:
        final_charge = actual * rate + card.processing_fee
        result = ReconciliationResult(
            final_charge=final_charge,
            refund_amount=max(0.0, total_paid - final_charge),
            overage_charge=0.0,
            description=f"Used {_hours(actual)} of {_hours(booked)} hours booked. Refund issued.",
        )
    elif actual > booked:
        overage_hours = actual - booked
        overage_charge = overage_hours * rate
        result = ReconciliationResult(
            final_charge=total_paid + overage_charge,
            refund_amount=0.0,
            overage_charge=overage_charge,
            description=f"Used {_hours(actual)} hours ({_hours(overage_hours)} overage). Additional charge applied.",
        )
    else:
        result = ReconciliationResult(
            final_charge=total_paid,
            refund_amount=0.0,
            overage_charge=0.0,
            description=f"Used exactly {_hours(actual)} hours as booked.",
        )

    _LOGGER.debug("Reconciled booking (%sh booked, %sh used): %s", booked, actual, result)
    return result


def usage_record_from_booking(
    booking: Mapping[str, Any],
    check_in: Timestamp,
    check_out: Timestamp,
) -> Result:
    """Build a UsageRecord from a stored booking row plus observed timestamps.

    Expects the snake_case columns the booking row stores:
    ``duration_hours, subtotal, processing_fee, nft_discount_applied``.

    Returns Ok(UsageRecord), or Err(InvalidUsageWindow) when ``check_out``
    precedes ``check_in``. Reconciling a negative span would refund more
    than was paid.
    """
    elapsed = try_elapsed_duration(check_in, check_out)
    if isinstance(elapsed, Err):
        _LOGGER.debug("Rejected usage window %s -> %s", check_in, check_out)
        return elapsed
    return Ok(
        UsageRecord(
            booked_hours=float(booking.get("duration_hours") or 0.0),
            actual_hours=elapsed.value,
            subtotal_paid=float(booking.get("subtotal") or 0.0),
            processing_fee_paid=float(booking.get("processing_fee") or 0.0),
            nft_discount_applied=bool(booking.get("nft_discount_applied")),
        )
    )


def cost_reconciliation(
    record: UsageRecord,
    initial_charge: Optional[float] = None,
    rate_card: Optional[RateCard] = None,
) -> Dict[str, Any]:
    """Payload for the "calculate current cost" endpoint and the payment adapter."""
    result = reconcile_usage(record, rate_card)
    return {
        "initial_charge": record.total_paid if initial_charge is None else initial_charge,
        "estimated_final_charge": result.final_charge,
        "estimated_refund": result.refund_amount,
        "estimated_overage": result.overage_charge,
        "description": result.description,
    }


def estimate_current_cost(
    booking: Mapping[str, Any],
    check_in: Timestamp,
    now: Optional[Timestamp] = None,
    rate_card: Optional[RateCard] = None,
) -> Result:
    """Estimate for a booking that is checked in but not yet checked out.

    Ok(payload) with ``hours_used_so_far`` and ``is_overtime`` added, or
    Err(InvalidUsageWindow) when ``now`` is before the check-in.
    """
    current = now if now is not None else datetime.now(timezone.utc)
    built = usage_record_from_booking(booking, check_in, current)
    if isinstance(built, Err):
        return built
    record = built.value
    payload = cost_reconciliation(record, booking.get("total_price"), rate_card)
    payload["hours_used_so_far"] = record.actual_hours
    payload["is_overtime"] = record.actual_hours > record.booked_hours
    return Ok(payload)


__all__ = [
    "effective_hourly_rate",
    "reconcile_usage",
    "usage_record_from_booking",
    "cost_reconciliation",
    "estimate_current_cost",
]
