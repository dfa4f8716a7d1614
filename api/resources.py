"""
Generic CRUD handler shared by the books and authors blueprints.

A ResourceHandler knows one model, its input schema, the field that must be
unique and the query parameters that may be used as list filters. It validates
input, applies the duplicate pre-check, and delegates to the persistence
service. Blueprints only translate between HTTP and these calls.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from flask import jsonify
from marshmallow import Schema, ValidationError
from sqlalchemy.exc import IntegrityError

from models import storage
from models.base_model import is_valid_id
from models.schemas.common import flatten_errors
from api.errors import Conflict, InvalidIdentifier, NotFound, ValidationFailed

logger = logging.getLogger(__name__)

BODY_MSG = "Request body must be a JSON object"


def as_true_flag(value: str) -> bool:
    # Only the literal "true" selects available records; anything else filters on False
    return value == "true"


class ResourceHandler:
    def __init__(
        self,
        model,
        schema: Schema,
        unique_field: str,
        filters: Mapping[str, Callable[[str], Any]],
        label: str,
        conflict_message: str,
    ):
        self.model = model
        self.schema = schema
        self.unique_field = unique_field
        self.filters = dict(filters)
        self.label = label
        self.conflict_message = conflict_message

    # -- validation -------------------------------------------------------

    def check_id(self, record_id: str) -> str:
        if not is_valid_id(record_id):
            raise InvalidIdentifier(f"Invalid {self.label.lower()} ID")
        return record_id

    def load(self, payload: Any, partial: bool = False) -> Dict[str, Any]:
        """Validate a request body; updates (partial=True) report the update wording."""
        if not isinstance(payload, dict):
            raise ValidationFailed(details=[{"field": "body", "message": BODY_MSG}])
        try:
            return self.schema.load(payload, partial=partial)
        except ValidationError as err:
            details = flatten_errors(err.messages)
            if partial:
                reworded = self.schema.UPDATE_MESSAGES
                details = [{**d, "message": reworded.get(d["message"], d["message"])} for d in details]
            raise ValidationFailed(details=details)

    def build_filter(self, args: Mapping[str, str]) -> Dict[str, Any]:
        """Equality filter from whitelisted query params; the rest are ignored."""
        return {name: convert(args[name]) for name, convert in self.filters.items() if name in args}

    # -- operations -------------------------------------------------------

    def list(self, args: Mapping[str, str]) -> list:
        return storage.find(self.model, **self.build_filter(args))

    def get(self, record_id: str):
        self.check_id(record_id)
        record = storage.get(self.model, record_id)
        if record is None:
            raise self.not_found()
        return record

    def create(self, payload: Any):
        data = self.load(payload)
        if self.find_duplicate(data[self.unique_field]) is not None:
            raise Conflict(self.conflict_message)
        try:
            return storage.insert(self.model(**data))
        except IntegrityError:
            # Lost a race with a concurrent writer; the unique index caught it
            logger.warning("%s insert hit unique constraint on %s", self.label, self.unique_field)
            raise Conflict(self.conflict_message)

    def update(self, record_id: str, payload: Any):
        self.check_id(record_id)
        changes = self.load(payload, partial=True)
        record = storage.get(self.model, record_id)
        if record is None:
            raise self.not_found()
        if self.unique_field in changes and changes[self.unique_field] != getattr(record, self.unique_field):
            if self.find_duplicate(changes[self.unique_field], exclude_id=record_id) is not None:
                raise Conflict(self.conflict_message)
        try:
            return storage.update(record, changes)
        except IntegrityError:
            logger.warning("%s %s update hit unique constraint on %s", self.label, record_id, self.unique_field)
            raise Conflict(self.conflict_message)

    def delete(self, record_id: str) -> None:
        self.check_id(record_id)
        if not storage.remove(self.model, record_id):
            raise self.not_found()

    # -- helpers ----------------------------------------------------------

    def find_duplicate(self, value, exclude_id: Optional[str] = None):
        return storage.find_one(self.model, exclude_id=exclude_id, **{self.unique_field: value})

    def not_found(self) -> NotFound:
        return NotFound(f"No {self.label.lower()} found with the provided ID")


def success(data=None, message: str | None = None, status: int = 200, **extra):
    """Uniform success envelope: {"success": true, [message], [data], ...}."""
    body: Dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return jsonify(body), status
