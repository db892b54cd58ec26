"""Turn a reconciliation into a gateway instruction.

The engine computes in major units (dollars). Gateways want integer minor
units (cents); the conversion lives here, at the adapter seam, with the
settings passed in explicitly by whoever wires the gateway client.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .charge_models.types import ReconciliationResult


@dataclass(frozen=True)
class GatewaySettings:
    currency: str = "USD"
    minor_unit_exponent: int = 2  # 2 for USD/EUR, 0 for JPY


@dataclass(frozen=True)
class Settlement:
    action: str  # "charge" | "refund" | "none"
    amount_minor: int
    currency: str
    description: str = ""


def to_minor_units(amount: float, settings: GatewaySettings) -> int:
    scaled = Decimal(str(amount)) * (Decimal(10) ** settings.minor_unit_exponent)
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def from_minor_units(amount_minor: int, settings: GatewaySettings) -> float:
    return amount_minor / (10 ** settings.minor_unit_exponent)


def build_settlement(result: ReconciliationResult, settings: GatewaySettings) -> Settlement:
    if result.refund_amount > 0:
        return Settlement("refund", to_minor_units(result.refund_amount, settings), settings.currency, result.description)
    if result.overage_charge > 0:
        return Settlement("charge", to_minor_units(result.overage_charge, settings), settings.currency, result.description)
    return Settlement("none", 0, settings.currency, result.description)


__all__ = ["GatewaySettings", "Settlement", "to_minor_units", "from_minor_units", "build_settlement"]
