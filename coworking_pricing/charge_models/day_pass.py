from __future__ import annotations

from .base import BaseChargeModel
from .types import BookingQuote, PaymentMethod, PricingContext, ResourceKind


class DayPassChargeModel(BaseChargeModel):
    """Flat-rate day pass. Duration does not affect the price."""

    kind = ResourceKind.DAY_PASS

    def price(self, ctx: PricingContext) -> BookingQuote:
        base = ctx.rate_card.day_pass_flat
        subtotal, discount, applied = self.apply_nft_discount(base, ctx)
        fee = ctx.rate_card.processing_fee

        return BookingQuote(
            resource_kind=self.kind,
            base_price=base,
            subtotal=subtotal,
            discount_amount=discount,
            nft_discount_applied=applied,
            processing_fee=fee,
            total_price=subtotal + fee,
            payment_method=PaymentMethod.CARD,
        )
