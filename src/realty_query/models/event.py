"""Application event log records."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime

from realty_query.models.enums import EventType


@dataclasses.dataclass(kw_only=True)
class Event:
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    created_at: datetime
    type: EventType = EventType.INFO
    title: str | None = None
    message: str | None = None
    user: str | None = None


__all__ = ["Event"]
