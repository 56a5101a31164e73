"""Identifier and timestamp stamping for persisted records.

Repositories call these helpers explicitly when inserting or updating a
record; nothing here hooks into the ORM.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Return a fresh opaque identifier (UUID4 text)."""
    return str(uuid.uuid4())


def stamp_created(record, now: Optional[datetime] = None):
    """Set both `created_at` and `updated_at` to the same instant."""
    now = now or utcnow()
    record.created_at = now
    record.updated_at = now
    return record


def stamp_updated(record, now: Optional[datetime] = None):
    """Refresh `updated_at` only; `created_at` is left untouched."""
    record.updated_at = now or utcnow()
    return record
