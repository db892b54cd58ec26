#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Coworking pricing engine – CLI

Flow:
- quote:     validate duration -> resolve rate/membership -> consume credits -> price
- reconcile: booked vs. actual hours -> final charge, refund or overage
- cost:      live estimate for a checked-in booking (uses "now" unless --now)
- duration:  scheduled ("HH:MM") or elapsed (timestamps) hours

Prices come from config.py defaults unless --rate-card (or
COWORKING_RATE_CARD) points at a YAML/JSON rate card.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown

from .charge_models.types import MembershipInfo, RateCard, ResourceKind, UsageRecord, WorkspaceInfo
from .config import AUDIT_LOG_PATH, DEFAULT_LOG_LEVEL, RATE_CARD_PATH
from .errors import PricingError
from .pricing.calculator import MEETING_ROOM_CREDIT_TYPE, QuoteRequest, quote_booking
from .pricing.duration import elapsed_duration, scheduled_duration, try_elapsed_duration
from .pricing.rates import default_rate_card
from .pricing.reconcile import estimate_current_cost, reconcile_usage
from .reporting.format import formatted_charges, pricing_summary, render_quote_table, render_reconciliation_table
from .result import Err
from .utils.audit import BookingAuditLog, open_audit_log

console = Console()
logger = logging.getLogger("coworking_pricing")

EXIT_OK = 0
EXIT_INVALID = 2


# --------------------------------------------------------------------
# Argument parsing
# --------------------------------------------------------------------
def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a Markdown table.")
    parser.add_argument("--booking-id", type=str, default=None, help="Booking reference recorded in the audit log.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coworking-pricing",
        description=(
            "Coworking pricing engine\n\n"
            "- Quotes hot desk, meeting room (credits) and day pass bookings\n"
            "- Applies membership coverage and the NFT holder discount\n"
            "- Reconciles booked vs. actual usage at checkout\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--rate-card",
        type=str,
        default=RATE_CARD_PATH,
        help="YAML/JSON rate card overriding the default prices.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=DEFAULT_LOG_LEVEL.upper(),
        help="Logging level for internal messages.",
    )
    parser.add_argument(
        "--audit-log",
        type=str,
        default=AUDIT_LOG_PATH,
        help="Append one JSONL audit line per quote/reconciliation to this file.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    q = sub.add_parser("quote", help="Price a booking.")
    q.add_argument("--kind", choices=[k.value for k in ResourceKind], default=ResourceKind.HOT_DESK.value)
    q.add_argument("--duration", type=float, default=None, help="Hours. Alternative to --start/--end.")
    q.add_argument("--start", type=str, default=None, help="Start time HH:MM.")
    q.add_argument("--end", type=str, default=None, help="End time HH:MM.")
    q.add_argument("--rate", type=float, default=None, help="Meeting room hourly price (required for meeting-room).")
    q.add_argument("--credits", type=float, default=0.0, help="Available meeting room credit hours.")
    q.add_argument("--min-duration", type=float, default=1.0)
    q.add_argument("--max-duration", type=float, default=8.0)
    q.add_argument("--nft", action="store_true", help="User is an NFT holder.")
    q.add_argument("--member", action="store_true", help="User has an active plan including hot desks.")
    _add_common(q)

    r = sub.add_parser("reconcile", help="Reconcile booked vs. actual usage at checkout.")
    r.add_argument("--booked", type=float, required=True, help="Booked hours.")
    r.add_argument("--actual", type=float, default=None, help="Actual hours. Alternative to --check-in/--check-out.")
    r.add_argument("--check-in", type=str, default=None, help="ISO-8601 check-in timestamp.")
    r.add_argument("--check-out", type=str, default=None, help="ISO-8601 check-out timestamp.")
    r.add_argument("--subtotal", type=float, required=True, help="Subtotal paid at booking.")
    r.add_argument("--fee", type=float, default=None, help="Processing fee paid (default: rate card fee).")
    r.add_argument("--nft", action="store_true", help="NFT discount was applied at booking.")
    _add_common(r)

    c = sub.add_parser("cost", help="Estimate the current cost of a checked-in booking.")
    c.add_argument("--booked", type=float, required=True)
    c.add_argument("--subtotal", type=float, required=True)
    c.add_argument("--fee", type=float, default=None)
    c.add_argument("--total", type=float, default=None, help="Total charged at booking.")
    c.add_argument("--check-in", type=str, required=True)
    c.add_argument("--now", type=str, default=None, help="Override the current time (ISO-8601).")
    c.add_argument("--nft", action="store_true")
    _add_common(c)

    d = sub.add_parser("duration", help="Compute a booking duration.")
    d.add_argument("--start", type=str, default=None)
    d.add_argument("--end", type=str, default=None)
    d.add_argument("--check-in", type=str, default=None)
    d.add_argument("--check-out", type=str, default=None)

    return parser


# --------------------------------------------------------------------
# Commands
# --------------------------------------------------------------------
def _fail(message: str) -> int:
    console.print(f"[red]{message}[/red]")
    return EXIT_INVALID


def _print(payload: dict, table: str, as_json: bool, extra: Optional[List[str]] = None) -> None:
    if as_json:
        console.print_json(json.dumps(payload))
        return
    console.print(Markdown(table))
    for line in extra or []:
        console.print(line)


def cmd_quote(args: argparse.Namespace, card: RateCard, audit: BookingAuditLog) -> int:
    if args.kind == ResourceKind.MEETING_ROOM.value and args.rate is None:
        return _fail("--rate is required for meeting-room quotes.")

    if args.duration is not None:
        duration = args.duration
    elif args.start and args.end:
        duration = scheduled_duration(args.start, args.end)
    elif args.kind == ResourceKind.DAY_PASS.value:
        duration = args.min_duration
    else:
        return _fail("Provide --duration or --start/--end.")

    workspace = WorkspaceInfo(
        resource_kind=ResourceKind(args.kind),
        base_price_hourly=args.rate or 0.0,
        min_duration=args.min_duration,
        max_duration=args.max_duration,
    )
    membership = MembershipInfo(
        has_active_plan=args.member,
        plan_includes_hot_desk=args.member,
        available_credits_by_type={MEETING_ROOM_CREDIT_TYPE: args.credits},
    )
    request = QuoteRequest(workspace=workspace, duration=duration, membership=membership, nft_holder=args.nft)

    result = quote_booking(request, rate_card=card)
    if isinstance(result, Err):
        audit.rejected(result.error, args.kind, duration, booking_id=args.booking_id)
        return _fail(str(result.error))

    quote = result.value
    audit.quoted(quote, duration, booking_id=args.booking_id)
    logger.info("Quoted %s for %sh: %.2f", args.kind, duration, quote.total_price)
    _print(quote.to_dict(), render_quote_table(quote), args.json, pricing_summary(quote, card))
    return EXIT_OK


def cmd_reconcile(args: argparse.Namespace, card: RateCard, audit: BookingAuditLog) -> int:
    if args.actual is not None:
        actual = args.actual
    elif args.check_in and args.check_out:
        elapsed = try_elapsed_duration(args.check_in, args.check_out)
        if isinstance(elapsed, Err):
            audit.rejected(elapsed.error, "checkout", booking_id=args.booking_id)
            return _fail(str(elapsed.error))
        actual = elapsed.value
    else:
        return _fail("Provide --actual or --check-in/--check-out.")

    record = UsageRecord(
        booked_hours=args.booked,
        actual_hours=actual,
        subtotal_paid=args.subtotal,
        processing_fee_paid=card.processing_fee if args.fee is None else args.fee,
        nft_discount_applied=args.nft,
    )
    result = reconcile_usage(record, card)
    audit.reconciled(record, result, booking_id=args.booking_id)
    _print(result.to_dict(), render_reconciliation_table(result, record.total_paid), args.json)
    return EXIT_OK


def cmd_cost(args: argparse.Namespace, card: RateCard, audit: BookingAuditLog) -> int:
    booking = {
        "duration_hours": args.booked,
        "subtotal": args.subtotal,
        "processing_fee": card.processing_fee if args.fee is None else args.fee,
        "nft_discount_applied": args.nft,
        "total_price": args.total,
    }
    estimate = estimate_current_cost(booking, args.check_in, args.now, card)
    if isinstance(estimate, Err):
        audit.rejected(estimate.error, "checkout", booking_id=args.booking_id)
        return _fail(str(estimate.error))

    payload = estimate.value
    audit.estimated(payload, booking_id=args.booking_id)
    if args.json:
        console.print_json(json.dumps(payload))
        return EXIT_OK
    for k, v in formatted_charges(payload).items():
        console.print(f"{k}: {v}")
    console.print(payload["description"])
    return EXIT_OK


def cmd_duration(args: argparse.Namespace) -> int:
    if args.start and args.end:
        console.print(f"{scheduled_duration(args.start, args.end):g}")
        return EXIT_OK
    if args.check_in and args.check_out:
        console.print(f"{elapsed_duration(args.check_in, args.check_out):g}")
        return EXIT_OK
    return _fail("Provide --start/--end or --check-in/--check-out.")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger.debug("CLI arguments: %s", args)

    try:
        card = default_rate_card(args.rate_card or None)
    except (OSError, ValueError) as ex:
        logger.error("Failed to load rate card %s: %s", args.rate_card, ex)
        return _fail(f"Invalid rate card: {ex}")

    audit = open_audit_log(args.audit_log or None)

    try:
        if args.command == "quote":
            return cmd_quote(args, card, audit)
        if args.command == "reconcile":
            return cmd_reconcile(args, card, audit)
        if args.command == "cost":
            return cmd_cost(args, card, audit)
        return cmd_duration(args)
    except PricingError as ex:
        return _fail(str(ex))
    except ValueError as ex:
        # unparseable ISO timestamps
        return _fail(f"Invalid input: {ex}")


if __name__ == "__main__":
    sys.exit(main())
