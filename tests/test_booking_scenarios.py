"""End-to-end booking scenarios: quote at booking time, reconcile at checkout."""

import pytest

from coworking_pricing import (
    MembershipInfo,
    QuoteRequest,
    RateCard,
    ResourceKind,
    UsageRecord,
    WorkspaceInfo,
    quote_booking,
    reconcile_usage,
)
from coworking_pricing.pricing.calculator import price_day_pass

CARD = RateCard(
    hot_desk_hourly=2.5,
    day_pass_flat=25.0,
    processing_fee=2.0,
    nft_discount_rate=0.5,
    cafe_discount_rate=0.1,
    currency="USD",
)
HOT_DESK = WorkspaceInfo(ResourceKind.HOT_DESK, base_price_hourly=2.5, min_duration=1, max_duration=8)
ROOM = WorkspaceInfo(ResourceKind.MEETING_ROOM, base_price_hourly=25, min_duration=1, max_duration=8)


def _quote(workspace, duration, nft=False, credits=0.0):
    membership = MembershipInfo(available_credits_by_type={"meeting-room": credits})
    return quote_booking(QuoteRequest(workspace, duration, membership, nft_holder=nft), rate_card=CARD).value


def test_hot_desk_four_hours():
    q = _quote(HOT_DESK, 4)
    assert q.subtotal == 10.0
    assert q.total_price == 12.0


def test_hot_desk_four_hours_nft_holder():
    q = _quote(HOT_DESK, 4, nft=True)
    assert q.discount_amount == 5.0
    assert q.subtotal == 5.0
    assert q.total_price == 7.0


def test_meeting_room_partial_credits():
    q = _quote(ROOM, 4, credits=2)
    assert q.credits_used == 2
    assert q.credits_overage_hours == 2
    assert q.overage_charge == 50.0
    assert q.total_price == 52.0


def test_meeting_room_partial_credits_nft_holder():
    q = _quote(ROOM, 4, nft=True, credits=2)
    assert q.discount_amount == 25.0
    assert q.overage_charge == 25.0
    assert q.total_price == 27.0


def test_day_pass_nft_holder():
    assert price_day_pass(nft_holder=True, rate_card=CARD).total_price == 14.5


@pytest.mark.parametrize(
    "actual, final_charge, refund, overage",
    [
        (3, 9.5, 2.5, 0.0),
        (5, 14.5, 0.0, 2.5),
        (4, 12.0, 0.0, 0.0),
    ],
)
def test_checkout_after_four_hour_booking(actual, final_charge, refund, overage):
    q = _quote(HOT_DESK, 4)
    record = UsageRecord(
        booked_hours=4,
        actual_hours=actual,
        subtotal_paid=q.subtotal,
        processing_fee_paid=q.processing_fee,
        nft_discount_applied=q.nft_discount_applied,
    )
    r = reconcile_usage(record, CARD)
    assert r.final_charge == final_charge
    assert r.refund_amount == refund
    assert r.overage_charge == overage


def test_member_books_hot_desk_for_free():
    member = MembershipInfo(has_active_plan=True, plan_includes_hot_desk=True)
    q = quote_booking(QuoteRequest(HOT_DESK, 6, member, nft_holder=True), rate_card=CARD).value
    assert q.payment_method.value == "membership"
    assert q.total_price == 0
