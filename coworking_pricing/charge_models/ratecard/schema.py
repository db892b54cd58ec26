"""Declarative rate-card schema.

A rate card file lets an operator change prices without touching code.
Every key is optional; missing keys fall back to config.py defaults.

    id: downtown-2025
    currency: USD
    processing_fee: 2.00
    hot_desk:
      hourly: 2.50
    day_pass:
      flat: 25.00
    discounts:
      nft_workspace: 0.5
      nft_cafe: 0.1
"""

from __future__ import annotations

from dataclasses import dataclass

from ..types import RateCard


@dataclass(frozen=True)
class RateCardDefinition:
    id: str
    rate_card: RateCard
    description: str = ""
    source_file: str = ""


# (section, key) -> RateCard field
FIELD_MAP = {
    ("hot_desk", "hourly"): "hot_desk_hourly",
    ("day_pass", "flat"): "day_pass_flat",
    ("discounts", "nft_workspace"): "nft_discount_rate",
    ("discounts", "nft_cafe"): "cafe_discount_rate",
}

# fields that must stay within [0, 1]
RATE_FIELDS = {"nft_discount_rate", "cafe_discount_rate"}
