from __future__ import annotations

from typing import Protocol, Tuple

from .types import BookingQuote, PricingContext, ResourceKind


class ChargeModel(Protocol):
    """A resource-kind-specific pricing policy."""

    kind: ResourceKind

    def uses_credits(self) -> bool: ...

    def price(self, ctx: PricingContext) -> BookingQuote: ...


class BaseChargeModel:
    """Shared helpers for the built-in charge models."""

    kind: ResourceKind = ResourceKind.HOT_DESK

    def uses_credits(self) -> bool:
        return False

    def price(self, ctx: PricingContext) -> BookingQuote:
        raise NotImplementedError

    @staticmethod
    def apply_nft_discount(amount: float, ctx: PricingContext) -> Tuple[float, float, bool]:
        """Return ``(discounted_amount, discount_amount, applied)``.

        The discount is always exactly ``nft_discount_rate`` of ``amount``.
        """
        if not ctx.nft_holder:
            return amount, 0.0, False
        discount = amount * ctx.rate_card.nft_discount_rate
        return amount - discount, discount, True
