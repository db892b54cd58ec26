"""Booking audit log: one JSON line per quote, rejection, reconciliation or estimate.

The pricing functions never write anything themselves. The CLI (or an HTTP
handler) hands each outcome to a ``BookingAuditLog`` so finance can replay
what a customer was quoted and what they were charged at checkout.

A line looks like::

    {"recorded_at": "2025-09-29T12:00:00+00:00", "event": "reconciled",
     "booking_id": "bk-42", "booked_hours": 4, "actual_hours": 3,
     "final_charge": 9.5, "refund_amount": 2.5, ...}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..charge_models.types import BookingQuote, ReconciliationResult, UsageRecord
from ..errors import PricingError

_LOGGER = logging.getLogger(__name__)


class AuditEvent(str, Enum):
    QUOTED = "quoted"
    REJECTED = "rejected"
    RECONCILED = "reconciled"
    ESTIMATED = "estimated"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AuditEntry:
    event: AuditEvent
    fields: Dict[str, Any]
    booking_id: Optional[str] = None
    recorded_at: str = field(default_factory=_utc_now)

    def to_json(self) -> str:
        line: Dict[str, Any] = {"recorded_at": self.recorded_at, "event": self.event.value}
        if self.booking_id:
            line["booking_id"] = self.booking_id
        line.update(self.fields)
        return json.dumps(line, ensure_ascii=False)


class BookingAuditLog:
    """Appends ``AuditEntry`` lines to ``path``; a no-op when ``path`` is None."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def quoted(self, quote: BookingQuote, duration: float, booking_id: Optional[str] = None) -> None:
        self._append(AuditEntry(AuditEvent.QUOTED, {"duration_hours": duration, **quote.to_dict()}, booking_id))

    def rejected(
        self,
        error: PricingError,
        subject: str,
        duration: Optional[float] = None,
        booking_id: Optional[str] = None,
    ) -> None:
        fields = {
            "subject": subject,
            "duration_hours": duration,
            "error": type(error).__name__,
            "message": str(error),
        }
        self._append(AuditEntry(AuditEvent.REJECTED, fields, booking_id))

    def reconciled(
        self,
        record: UsageRecord,
        result: ReconciliationResult,
        booking_id: Optional[str] = None,
    ) -> None:
        fields = {
            "booked_hours": record.booked_hours,
            "actual_hours": record.actual_hours,
            "total_paid": record.total_paid,
            **result.to_dict(),
        }
        self._append(AuditEntry(AuditEvent.RECONCILED, fields, booking_id))

    def estimated(self, payload: Dict[str, Any], booking_id: Optional[str] = None) -> None:
        self._append(AuditEntry(AuditEvent.ESTIMATED, dict(payload), booking_id))

    def entries(self) -> List[Dict[str, Any]]:
        """Parsed lines written so far (empty when disabled or nothing logged)."""
        if self.path is None or not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]

    def _append(self, entry: AuditEntry) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry.to_json() + "\n")
        _LOGGER.debug("Audit %s for booking %s -> %s", entry.event.value, entry.booking_id or "-", self.path)


def open_audit_log(path: Path | str | None) -> BookingAuditLog:
    return BookingAuditLog(Path(path) if path else None)


__all__ = ["AuditEvent", "AuditEntry", "BookingAuditLog", "open_audit_log"]
