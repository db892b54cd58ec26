from __future__ import annotations

from .base import BaseChargeModel
from .types import BookingQuote, PaymentMethod, PricingContext, ResourceKind


class HotDeskChargeModel(BaseChargeModel):
    """Hourly hot desk: rate x hours, NFT discount on the subtotal, card fee."""

    kind = ResourceKind.HOT_DESK

    def price(self, ctx: PricingContext) -> BookingQuote:
        subtotal = ctx.base_rate * ctx.duration
        subtotal, discount, applied = self.apply_nft_discount(subtotal, ctx)
        fee = ctx.rate_card.processing_fee

        return BookingQuote(
            resource_kind=self.kind,
            base_price=ctx.base_rate,
            subtotal=subtotal,
            discount_amount=discount,
            nft_discount_applied=applied,
            processing_fee=fee,
            total_price=subtotal + fee,
            payment_method=PaymentMethod.CARD,
        )
