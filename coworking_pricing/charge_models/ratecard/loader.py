"""Rate-card loader.

Loads a YAML/JSON rate card and normalizes it into a RateCard.

The loader is intentionally conservative:
- numbers must be non-negative
- discount rates must be within [0, 1]

If a file is invalid, it raises ValueError with a readable message,
so a misconfigured process fails at startup instead of mispricing.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

import yaml

from ..types import RateCard
from .schema import FIELD_MAP, RATE_FIELDS, RateCardDefinition

_LOGGER = logging.getLogger(__name__)


def _load_one(path: Path) -> Dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(raw) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML must be a mapping in {path}")
        return data
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Top-level JSON must be an object in {path}")
        return data
    raise ValueError(f"Unsupported rate card file type: {path}")


def _as_amount(value: Any, *, field_name: str, ctx: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number in {ctx}")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number in {ctx}, got {value!r}") from None
    if amount < 0:
        raise ValueError(f"{field_name} cannot be negative in {ctx}")
    if field_name in RATE_FIELDS and amount > 1:
        raise ValueError(f"{field_name} must be between 0 and 1 in {ctx}")
    return amount


def parse_rate_card(data: Dict[str, Any], *, ctx: str = "rate_card", base: RateCard | None = None) -> RateCard:
    card = base or RateCard()
    updates: Dict[str, Any] = {}

    for (section, key), field_name in FIELD_MAP.items():
        block = data.get(section)
        if block is None:
            continue
        if not isinstance(block, dict):
            raise ValueError(f"{section} must be an object in {ctx}")
        if key in block:
            updates[field_name] = _as_amount(block[key], field_name=field_name, ctx=f"{ctx}.{section}")

    if "processing_fee" in data:
        updates["processing_fee"] = _as_amount(data["processing_fee"], field_name="processing_fee", ctx=ctx)
    if "currency" in data:
        currency = str(data["currency"] or "").strip().upper()
        if not currency:
            raise ValueError(f"currency cannot be empty in {ctx}")
        updates["currency"] = currency

    return replace(card, **updates)


def load_rate_card(path: Path | str) -> RateCardDefinition:
    p = Path(path)
    data = _load_one(p)
    ctx = f"rate_card({p.name})"
    card = parse_rate_card(data, ctx=ctx)
    definition = RateCardDefinition(
        id=str(data.get("id") or p.stem).strip(),
        rate_card=card,
        description=str(data.get("description") or ""),
        source_file=p.name,
    )
    _LOGGER.debug("Loaded rate card %s from %s: %s", definition.id, p, card)
    return definition
