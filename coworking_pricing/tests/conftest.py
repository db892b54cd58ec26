import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from coworking_pricing.charge_models.types import (  # noqa: E402
    MembershipInfo,
    RateCard,
    ResourceKind,
    WorkspaceInfo,
)


@pytest.fixture
def rate_card() -> RateCard:
    # Pinned so COWORKING_* env vars on the host cannot shift expectations.
    return RateCard(
        hot_desk_hourly=2.5,
        day_pass_flat=25.0,
        processing_fee=2.0,
        nft_discount_rate=0.5,
        cafe_discount_rate=0.1,
        currency="USD",
    )


@pytest.fixture
def hot_desk() -> WorkspaceInfo:
    return WorkspaceInfo(resource_kind=ResourceKind.HOT_DESK, base_price_hourly=2.5, min_duration=1, max_duration=8)


@pytest.fixture
def focus_room() -> WorkspaceInfo:
    return WorkspaceInfo(resource_kind=ResourceKind.MEETING_ROOM, base_price_hourly=25, min_duration=1, max_duration=8)


@pytest.fixture
def no_membership() -> MembershipInfo:
    return MembershipInfo()
