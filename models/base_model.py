#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the Library Catalog API.

- UUID primary key (String(36)) generated on construction
- created_at / updated_at timestamps, stored as naive UTC
- is_valid_id() to check path identifiers before touching the database
"""

from __future__ import annotations

from datetime import datetime, timezone
import re
import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

# Declarative base for all models
Base = declarative_base()

ID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


def _uuid_str() -> str:
    """Return a canonical UUIDv4 string (36 chars, with hyphens)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # SQLite drops tzinfo on the way back, so keep everything naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_id(value) -> bool:
    """True if value looks like an identifier this service would generate."""
    return isinstance(value, str) and bool(ID_PATTERN.match(value))


class BaseModel:
    """
    Base mixin for all persistent models.

    - id, created_at, updated_at
    - kwargs constructor that ignores unknown keys starting with "__"
    """

    id = Column(String(36), primary_key=True, default=_uuid_str, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __init__(self, *args, **kwargs):
        for key, value in kwargs.items():
            if not key.startswith("__"):
                setattr(self, key, value)
        # Ensure an id exists before the first flush so callers can log it
        if getattr(self, "id", None) is None:
            self.id = _uuid_str()
        now = utcnow()
        if getattr(self, "created_at", None) is None:
            self.created_at = now
        if getattr(self, "updated_at", None) is None:
            self.updated_at = now
