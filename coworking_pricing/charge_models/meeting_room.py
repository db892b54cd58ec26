from __future__ import annotations

from .base import BaseChargeModel
from .types import BookingQuote, CreditConsumption, PaymentMethod, PricingContext, ResourceKind


class MeetingRoomChargeModel(BaseChargeModel):
    """Meeting room paid with membership credits, overage hours on card.

    Only the overage is charged (and discounted). The processing fee applies
    only when there is an overage.
    """

    kind = ResourceKind.MEETING_ROOM

    def uses_credits(self) -> bool:
        return True

    def price(self, ctx: PricingContext) -> BookingQuote:
        consumption = ctx.consumption or CreditConsumption(credits_used=0.0, overage_hours=ctx.duration)
        overage_hours = consumption.overage_hours

        overage_charge = overage_hours * ctx.base_rate
        discount = 0.0
        applied = False
        if overage_hours > 0:
            overage_charge, discount, applied = self.apply_nft_discount(overage_charge, ctx)

        fee = ctx.rate_card.processing_fee if overage_hours > 0 else 0.0

        # Mixed credits + card collapses into CARD, same as a pure card booking.
        if consumption.credits_used == ctx.duration:
            method = PaymentMethod.CREDITS
        else:
            method = PaymentMethod.CARD

        return BookingQuote(
            resource_kind=self.kind,
            base_price=ctx.base_rate,
            subtotal=overage_charge,
            discount_amount=discount,
            nft_discount_applied=applied,
            credits_used=consumption.credits_used,
            credits_overage_hours=overage_hours,
            overage_charge=overage_charge,
            processing_fee=fee,
            total_price=overage_charge + fee,
            payment_method=method,
        )
