"""Base-rate resolution and membership short-circuit.

Hot desk and day pass prices are global (rate card); meeting rooms carry
their own hourly price on the workspace record. An active membership that
includes hot desks makes a hot desk booking free.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..charge_models.ratecard import load_rate_card
from ..charge_models.types import (
    BookingQuote,
    MembershipInfo,
    PaymentMethod,
    RateCard,
    ResourceKind,
    WorkspaceInfo,
)


@dataclass(frozen=True)
class RateResolution:
    kind: ResourceKind
    base_rate: float
    covered_by_membership: bool = False


def default_rate_card(path: Optional[Path | str] = None) -> RateCard:
    """RateCard from ``path`` if given, else the config.py defaults."""
    if path:
        return load_rate_card(path).rate_card
    return RateCard()


def membership_covers(kind: ResourceKind, membership: Optional[MembershipInfo]) -> bool:
    if membership is None or kind is not ResourceKind.HOT_DESK:
        return False
    return bool(membership.has_active_plan and membership.plan_includes_hot_desk)


def resolve_rate(
    kind: ResourceKind,
    membership: Optional[MembershipInfo] = None,
    workspace: Optional[WorkspaceInfo] = None,
    rate_card: Optional[RateCard] = None,
) -> RateResolution:
    card = rate_card or RateCard()
    kind = ResourceKind(kind)

    if kind is ResourceKind.HOT_DESK:
        base = card.hot_desk_hourly
    elif kind is ResourceKind.DAY_PASS:
        base = card.day_pass_flat
    else:
        base = float(workspace.base_price_hourly) if workspace is not None else 0.0

    return RateResolution(kind=kind, base_rate=base, covered_by_membership=membership_covers(kind, membership))


def membership_quote(kind: ResourceKind = ResourceKind.HOT_DESK, rate_card: Optional[RateCard] = None) -> BookingQuote:
    """All-zero quote for a booking the membership already pays for."""
    card = rate_card or RateCard()
    return BookingQuote(
        resource_kind=ResourceKind(kind),
        base_price=card.hot_desk_hourly,
        payment_method=PaymentMethod.MEMBERSHIP,
    )


__all__ = ["RateCard", "RateResolution", "default_rate_card", "membership_covers", "resolve_rate", "membership_quote"]
