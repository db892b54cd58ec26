from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .base import ChargeModel
from .day_pass import DayPassChargeModel
from .hot_desk import HotDeskChargeModel
from .meeting_room import MeetingRoomChargeModel
from .types import ResourceKind


def _as_kind(kind: Union[ResourceKind, str]) -> Optional[ResourceKind]:
    if isinstance(kind, ResourceKind):
        return kind
    try:
        return ResourceKind(str(kind).strip().lower().replace("_", "-"))
    except ValueError:
        return None


@dataclass
class ChargeModelRegistry:
    """Lookup table for charge models by resource kind."""

    models: Dict[ResourceKind, ChargeModel] = field(default_factory=dict)

    def register(self, kind: Union[ResourceKind, str], model: ChargeModel) -> None:
        resolved = _as_kind(kind)
        if resolved is None:
            raise ValueError(f"Unknown resource kind: {kind!r}")
        self.models[resolved] = model

    def get(self, kind: Union[ResourceKind, str]) -> Optional[ChargeModel]:
        resolved = _as_kind(kind)
        if resolved is None:
            return None
        return self.models.get(resolved)


def build_default_registry() -> ChargeModelRegistry:
    reg = ChargeModelRegistry()
    reg.register(ResourceKind.HOT_DESK, HotDeskChargeModel())
    reg.register(ResourceKind.MEETING_ROOM, MeetingRoomChargeModel())
    reg.register(ResourceKind.DAY_PASS, DayPassChargeModel())
    return reg
