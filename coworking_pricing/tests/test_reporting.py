from dataclasses import replace

from coworking_pricing.charge_models.types import ReconciliationResult
from coworking_pricing.pricing.calculator import price_day_pass, price_hourly_desk, price_meeting_room_for
from coworking_pricing.reporting.format import (
    format_price,
    formatted_charges,
    pricing_summary,
    render_quote_table,
    render_reconciliation_table,
)


def test_format_price():
    assert format_price(12) == "$12.00"
    assert format_price(2.5) == "$2.50"
    assert format_price(3.456, symbol="€") == "€3.46"


def test_summary_for_hot_desk_with_discount(rate_card):
    lines = pricing_summary(price_hourly_desk(4, nft_holder=True, rate_card=rate_card), rate_card)
    assert lines == [
        "Subtotal: $5.00",
        "NFT Holder Discount (50%): -$5.00",
        "Processing Fee: $2.00",
        "Total: $7.00",
    ]


def test_summary_discount_label_follows_rate_card(rate_card):
    card = replace(rate_card, nft_discount_rate=0.25)
    lines = pricing_summary(price_hourly_desk(4, nft_holder=True, rate_card=card), card)
    assert "NFT Holder Discount (25%): -$2.50" in lines
    assert lines[-1] == "Total: $9.50"


def test_summary_for_meeting_room_overage(rate_card, focus_room):
    lines = pricing_summary(price_meeting_room_for(focus_room, 4, 2, rate_card=rate_card), rate_card)
    assert lines == [
        "Credits used: 2 hours",
        "Overage: 2 hours @ $25.00/hr = $50.00",
        "Processing Fee: $2.00",
        "Total: $52.00",
    ]


def test_summary_for_fully_credited_room(rate_card, focus_room):
    lines = pricing_summary(price_meeting_room_for(focus_room, 2, 8, rate_card=rate_card), rate_card)
    assert lines == ["Credits used: 2 hours", "Total: $0.00"]


def test_quote_table_snapshot(rate_card):
    table = render_quote_table(price_day_pass(nft_holder=True, rate_card=rate_card))
    assert table.splitlines() == [
        "| Field | Value |",
        "|---|---|",
        "| Resource | day-pass |",
        "| Base price | $25.00 |",
        "| Subtotal | $12.50 |",
        "| NFT discount | -$12.50 |",
        "| Processing fee | $2.00 |",
        "| **Total** | **$14.50** |",
        "| Payment method | card |",
    ]


def test_quote_table_for_meeting_room_lists_credits(rate_card, focus_room):
    table = render_quote_table(price_meeting_room_for(focus_room, 4, 2, rate_card=rate_card))
    assert "| Credits used (h) | 2 |" in table
    assert "| Overage charge | $50.00 |" in table
    assert "| NFT discount | - |" in table


def test_reconciliation_table_escapes_pipes():
    result = ReconciliationResult(9.5, 2.5, 0.0, "a|b")
    table = render_reconciliation_table(result, initial_charge=12)
    assert "| Initial charge | $12.00 |" in table
    assert "| Refund | $2.50 |" in table
    assert "| Description | a\\|b |" in table


def test_formatted_charges():
    payload = {"initial_charge": 12, "estimated_final_charge": 9.5, "estimated_refund": 2.5, "description": "x"}
    assert formatted_charges(payload) == {
        "initial_charge": "$12.00",
        "estimated_final_charge": "$9.50",
        "estimated_refund": "$2.50",
    }
