from pathlib import Path

from coworking_pricing.charge_models.types import ReconciliationResult, UsageRecord
from coworking_pricing.errors import DurationOutOfRange
from coworking_pricing.payments import GatewaySettings, build_settlement, from_minor_units, to_minor_units
from coworking_pricing.pricing.calculator import price_hourly_desk
from coworking_pricing.utils.audit import AuditEvent, BookingAuditLog, open_audit_log


def test_minor_unit_conversion():
    usd = GatewaySettings("USD", 2)
    assert to_minor_units(12.0, usd) == 1200
    assert to_minor_units(0.1 + 0.2, usd) == 30
    assert to_minor_units(2.675, usd) == 268
    assert from_minor_units(1450, usd) == 14.5
    assert to_minor_units(1450, GatewaySettings("JPY", 0)) == 1450


def test_settlement_actions():
    usd = GatewaySettings()
    refund = build_settlement(ReconciliationResult(9.5, 2.5, 0.0, "refund"), usd)
    assert (refund.action, refund.amount_minor, refund.currency) == ("refund", 250, "USD")

    charge = build_settlement(ReconciliationResult(14.5, 0.0, 2.5, "overage"), usd)
    assert (charge.action, charge.amount_minor) == ("charge", 250)

    none = build_settlement(ReconciliationResult(12.0, 0.0, 0.0, "exact"), usd)
    assert (none.action, none.amount_minor) == ("none", 0)



def test_audit_log_records_quote_and_reconciliation(tmp_path: Path, rate_card):
    audit = open_audit_log(tmp_path / "nested" / "audit.jsonl")
    quote = price_hourly_desk(4, rate_card=rate_card)
    audit.quoted(quote, 4, booking_id="bk-1")

    record = UsageRecord(4, 3, quote.subtotal, quote.processing_fee, False)
    audit.reconciled(record, ReconciliationResult(9.5, 2.5, 0.0, "Used 3 of 4 hours booked. Refund issued."))

    first, second = audit.entries()
    assert first["event"] == AuditEvent.QUOTED.value
    assert first["booking_id"] == "bk-1"
    assert first["duration_hours"] == 4
    assert first["resource_kind"] == "hot-desk"
    assert first["total_price"] == 12.0
    assert second["event"] == "reconciled"
    assert "booking_id" not in second
    assert second["total_paid"] == 12.0
    assert second["refund_amount"] == 2.5


def test_audit_log_records_rejection(tmp_path: Path):
    audit = open_audit_log(tmp_path / "audit.jsonl")
    error = DurationOutOfRange(9, DurationOutOfRange.ABOVE_MAXIMUM, minimum=1, maximum=8)
    audit.rejected(error, "hot-desk", 9, booking_id="bk-2")
    (entry,) = audit.entries()
    assert entry["error"] == "DurationOutOfRange"
    assert entry["message"] == "Maximum booking duration is 8 hours"
    assert entry["subject"] == "hot-desk"


def test_audit_log_disabled_without_path(rate_card):
    audit = open_audit_log(None)
    audit.quoted(price_hourly_desk(1, rate_card=rate_card), 1)
    assert audit.enabled is False
    assert audit.entries() == []
    assert isinstance(audit, BookingAuditLog)
