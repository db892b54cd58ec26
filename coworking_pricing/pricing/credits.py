"""Split a meeting-room duration into credit-covered and overage hours.

This only reads the balance it is given. Decrementing the stored balance
is the job of whoever owns the credit ledger, and must happen under a
serialized write there; two bookings reading the same balance concurrently
would otherwise both spend it.
"""

from __future__ import annotations

from typing import Union

from ..charge_models.types import CreditBalance, CreditConsumption


def consume(duration: float, available_credits: Union[float, CreditBalance]) -> CreditConsumption:
    if isinstance(available_credits, CreditBalance):
        available = available_credits.available_hours
    else:
        available = available_credits
    available = max(0.0, float(available or 0.0))

    credits_used = min(duration, available)
    overage_hours = max(0.0, duration - credits_used)
    return CreditConsumption(credits_used=credits_used, overage_hours=overage_hours)


def remaining_after(balance: CreditBalance, consumption: CreditConsumption) -> CreditBalance:
    """Balance the ledger owner should write back after the booking."""
    left = max(0.0, balance.available_hours - consumption.credits_used)
    return CreditBalance(credit_type=balance.credit_type, available_hours=left)


__all__ = ["consume", "remaining_after"]
