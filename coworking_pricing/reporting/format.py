from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..charge_models.types import BookingQuote, RateCard, ReconciliationResult
from ..config import DISPLAY_SYMBOL
from ..pricing.discounts import DiscountCalculation


def format_price(amount: float, symbol: str = DISPLAY_SYMBOL) -> str:
    return f"{symbol}{amount:.2f}"


def _md_escape(v: Any) -> str:
    s = "" if v is None else str(v)
    return s.replace("|", "\\|").replace("\n", " ").strip()


def _hours(v: float) -> str:
    return f"{v:g}"


def format_discount_display(calc: DiscountCalculation, symbol: str = DISPLAY_SYMBOL) -> str:
    if not calc.nft_holder:
        return format_price(calc.final_price, symbol)
    return f"{format_price(calc.final_price, symbol)} ({calc.discount_rate * 100:.0f}% NFT holder discount)"


def pricing_summary(
    quote: BookingQuote,
    rate_card: Optional[RateCard] = None,
    symbol: str = DISPLAY_SYMBOL,
) -> List[str]:
    """Human-readable lines describing a quote, in display order.

    The discount label uses the rate card the quote was priced with.
    """
    discount_rate = (rate_card or RateCard()).nft_discount_rate
    lines: List[str] = []

    if quote.credits_used > 0:
        lines.append(f"Credits used: {_hours(quote.credits_used)} hours")

    if quote.credits_overage_hours > 0:
        lines.append(
            f"Overage: {_hours(quote.credits_overage_hours)} hours @ {format_price(quote.base_price, symbol)}/hr"
            f" = {format_price(quote.overage_charge, symbol)}"
        )

    if quote.subtotal > 0 and quote.credits_overage_hours == 0:
        lines.append(f"Subtotal: {format_price(quote.subtotal, symbol)}")

    if quote.nft_discount_applied:
        lines.append(f"NFT Holder Discount ({discount_rate * 100:.0f}%): -{format_price(quote.discount_amount, symbol)}")

    if quote.processing_fee > 0:
        lines.append(f"Processing Fee: {format_price(quote.processing_fee, symbol)}")

    lines.append(f"Total: {format_price(quote.total_price, symbol)}")
    return lines


def render_quote_table(quote: BookingQuote, symbol: str = DISPLAY_SYMBOL) -> str:
    rows = [
        "| Field | Value |",
        "|---|---|",
        f"| Resource | {_md_escape(quote.resource_kind.value)} |",
        f"| Base price | {format_price(quote.base_price, symbol)} |",
    ]
    if quote.credits_used or quote.credits_overage_hours:
        rows.append(f"| Credits used (h) | {_hours(quote.credits_used)} |")
        rows.append(f"| Overage (h) | {_hours(quote.credits_overage_hours)} |")
        rows.append(f"| Overage charge | {format_price(quote.overage_charge, symbol)} |")
    else:
        rows.append(f"| Subtotal | {format_price(quote.subtotal, symbol)} |")
    rows.append(f"| NFT discount | {'-' + format_price(quote.discount_amount, symbol) if quote.nft_discount_applied else '-'} |")
    rows.append(f"| Processing fee | {format_price(quote.processing_fee, symbol)} |")
    rows.append(f"| **Total** | **{format_price(quote.total_price, symbol)}** |")
    rows.append(f"| Payment method | {_md_escape(quote.payment_method.value)} |")
    return "\n".join(rows)


def render_reconciliation_table(
    result: ReconciliationResult,
    initial_charge: Optional[float] = None,
    symbol: str = DISPLAY_SYMBOL,
) -> str:
    rows = ["| Field | Value |", "|---|---|"]
    if initial_charge is not None:
        rows.append(f"| Initial charge | {format_price(initial_charge, symbol)} |")
    rows.append(f"| Final charge | {format_price(result.final_charge, symbol)} |")
    rows.append(f"| Refund | {format_price(result.refund_amount, symbol)} |")
    rows.append(f"| Overage | {format_price(result.overage_charge, symbol)} |")
    rows.append(f"| Description | {_md_escape(result.description)} |")
    return "\n".join(rows)


def formatted_charges(payload: Dict[str, Any], symbol: str = DISPLAY_SYMBOL) -> Dict[str, str]:
    """Money fields of a cost-reconciliation payload, formatted for display."""
    keys = ("initial_charge", "estimated_final_charge", "estimated_refund", "estimated_overage")
    return {k: format_price(float(payload.get(k) or 0.0), symbol) for k in keys if k in payload}
