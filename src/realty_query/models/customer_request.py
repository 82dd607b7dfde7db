"""Customer request records (contact forms, showing requests)."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime


@dataclasses.dataclass(kw_only=True)
class RequestInformation:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None
    listing_id: uuid.UUID | None = None


@dataclasses.dataclass(kw_only=True)
class CustomerRequestReply:
    date: datetime
    message: str


@dataclasses.dataclass(kw_only=True)
class CustomerRequest:
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    date_time_utc: datetime
    read: bool = False
    request: RequestInformation
    replies: list[CustomerRequestReply] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(kw_only=True)
class CustomerRequestListItem:
    id: uuid.UUID
    date_time_utc: datetime
    read: bool = False
    request_name: str | None = None
    request_email: str | None = None


__all__ = [
    "CustomerRequest",
    "CustomerRequestListItem",
    "CustomerRequestReply",
    "RequestInformation",
]
