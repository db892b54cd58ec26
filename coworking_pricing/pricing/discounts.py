"""NFT holder discounts for workspace bookings and cafe orders.

Workspace charges get ``RateCard.nft_discount_rate`` (50% by default),
cafe orders ``RateCard.cafe_discount_rate`` (10%).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional

from ..charge_models.types import RateCard


class DiscountCategory(str, Enum):
    WORKSPACE = "workspace"
    CAFE = "cafe"


@dataclass(frozen=True)
class DiscountCalculation:
    original_price: float
    discount_rate: float
    discount_amount: float
    final_price: float
    nft_holder: bool


def discount_rate(category: DiscountCategory | str, rate_card: Optional[RateCard] = None) -> float:
    card = rate_card or RateCard()
    if DiscountCategory(category) is DiscountCategory.WORKSPACE:
        return card.nft_discount_rate
    return card.cafe_discount_rate


def calculate_discounted_price(
    base_price: float,
    category: DiscountCategory | str,
    nft_holder: bool,
    rate_card: Optional[RateCard] = None,
) -> DiscountCalculation:
    if not nft_holder:
        return DiscountCalculation(base_price, 0.0, 0.0, base_price, False)
    rate = discount_rate(category, rate_card)
    amount = base_price * rate
    return DiscountCalculation(base_price, rate, amount, base_price - amount, True)


def apply_nft_discount(
    price: float,
    category: DiscountCategory | str,
    nft_holder: bool,
    rate_card: Optional[RateCard] = None,
) -> float:
    if not nft_holder:
        return price
    return price * (1 - discount_rate(category, rate_card))


def calculate_bulk_price(
    items: Iterable[Mapping[str, Any]],
    category: DiscountCategory | str,
    nft_holder: bool,
    rate_card: Optional[RateCard] = None,
) -> DiscountCalculation:
    """Sum ``price * quantity`` (quantity defaults to 1) and discount the total."""
    total = 0.0
    for it in items:
        total += float(it.get("price") or 0.0) * float(it.get("quantity") or 1)
    return calculate_discounted_price(total, category, nft_holder, rate_card)


def validate_discounted_price(
    received_price: float,
    base_price: float,
    category: DiscountCategory | str,
    nft_holder: bool,
    tolerance: float = 0.01,
    rate_card: Optional[RateCard] = None,
) -> bool:
    """Check a client-submitted price against the expected discounted price."""
    expected = apply_nft_discount(base_price, category, nft_holder, rate_card)
    return abs(received_price - expected) <= tolerance


def pricing_breakdown(
    base_price: float,
    category: DiscountCategory | str,
    nft_holder: bool,
    rate_card: Optional[RateCard] = None,
) -> Dict[str, Any]:
    calc = calculate_discounted_price(base_price, category, nft_holder, rate_card)
    return {
        "base_price": calc.original_price,
        "discount_rate": calc.discount_rate,
        "discount_amount": calc.discount_amount,
        "final_price": calc.final_price,
        "nft_holder": calc.nft_holder,
        "category": DiscountCategory(category).value,
        "savings": calc.discount_amount,
    }


__all__ = [
    "DiscountCategory",
    "DiscountCalculation",
    "discount_rate",
    "calculate_discounted_price",
    "apply_nft_discount",
    "calculate_bulk_price",
    "validate_discounted_price",
    "pricing_breakdown",
]
