"""
Create, update and delete pipeline shared by every record type.

validate -> transform -> persist -> invalidate views -> navigate

Subclasses declare the model, schemas, list path and the view paths their
records appear on; only ``transform`` carries per-entity logic.
"""

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type

from django.db import models

from ..validation import BaseSchema, ValidationError
from .action_result import ActionResult, FieldErrors, Message, Navigate
from .record_store import PersistenceError, RecordStore
from .view_cache import ViewCache

logger = logging.getLogger(__name__)


class MutationService:
    entity: ClassVar[str] = ""
    model: ClassVar[Optional[Type[models.Model]]] = None
    create_schema: ClassVar[Optional[Type[BaseSchema]]] = None
    update_schema: ClassVar[Optional[Type[BaseSchema]]] = None
    list_path: ClassVar[str] = "/"
    invalidates: ClassVar[Tuple[str, ...]] = ()
    store: ClassVar[RecordStore] = RecordStore()

    @classmethod
    def transform(cls, data: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        """Map a validated record onto model fields."""
        return dict(data)

    @classmethod
    def create(cls, raw: Mapping[str, Any]) -> ActionResult:
        return cls._save("Create", raw)

    @classmethod
    def update(cls, record_id: Any, raw: Mapping[str, Any]) -> ActionResult:
        return cls._save("Update", raw, record_id=record_id)

    @classmethod
    def delete(cls, record_id: Any) -> ActionResult:
        try:
            cls.store.delete(cls.model, record_id)
        except PersistenceError:
            return Message(message=f"Database Error: Failed to Delete {cls.entity}.")

        cls.revalidate()
        logger.info("%s %s deleted", cls.entity, record_id)
        return Message(message=f"Deleted {cls.entity}.", ok=True)

    @classmethod
    def revalidate(cls) -> None:
        for view_path in cls.invalidates:
            ViewCache.invalidate(view_path)

    @classmethod
    def _save(cls, operation: str, raw: Mapping[str, Any], record_id: Any = None) -> ActionResult:
        creating = record_id is None
        schema = cls.create_schema if creating else cls.update_schema

        try:
            record = schema.parse(raw)
        except ValidationError as e:
            logger.info("%s %s rejected: %s", operation, cls.entity, sorted(e.field_errors))
            return FieldErrors(
                errors=e.field_errors,
                message=f"Missing Fields. Failed to {operation} {cls.entity}.",
            )

        fields = cls.transform(record, creating=creating)

        try:
            if creating:
                cls.store.insert(cls.model, fields)
            else:
                updated = cls.store.update(cls.model, record_id, fields)
                if not updated:
                    logger.warning("%s %s matched no rows", operation, cls.entity)
        except PersistenceError:
            return Message(message=f"Database Error: Failed to {operation} {cls.entity}.")

        cls.revalidate()
        return Navigate(path=cls.list_path)
