from .format import (
    format_discount_display,
    format_price,
    formatted_charges,
    pricing_summary,
    render_quote_table,
    render_reconciliation_table,
)

__all__ = [
    "format_price",
    "format_discount_display",
    "formatted_charges",
    "pricing_summary",
    "render_quote_table",
    "render_reconciliation_table",
]
