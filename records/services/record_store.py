import logging
from typing import Any, Dict, Type

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, models, transaction

logger = logging.getLogger(__name__)

STORE_FAULTS = (DatabaseError, DjangoValidationError, ValueError, OverflowError)


class PersistenceError(Exception):
    """A store statement failed. The original fault is chained as ``__cause__``."""

    def __init__(self, operation: str, model: Type[models.Model]):
        self.operation = operation
        self.model = model
        super().__init__(f"{operation} on {model._meta.label} failed")


class RecordStore:
    """
    Single-statement writes against the database.

    Every call is atomic on its own; connectivity problems, constraint
    violations and malformed identifiers all surface as PersistenceError.
    """

    def insert(self, model: Type[models.Model], fields: Dict[str, Any]) -> models.Model:
        try:
            with transaction.atomic():
                return model.objects.create(**fields)
        except STORE_FAULTS as e:
            logger.exception(f"Insert into {model._meta.db_table} failed: {e}")
            raise PersistenceError("insert", model) from e

    def update(self, model: Type[models.Model], record_id: Any, fields: Dict[str, Any]) -> int:
        try:
            with transaction.atomic():
                return model.objects.filter(pk=record_id).update(**fields)
        except STORE_FAULTS as e:
            logger.exception(f"Update of {model._meta.db_table} {record_id} failed: {e}")
            raise PersistenceError("update", model) from e

    def delete(self, model: Type[models.Model], record_id: Any) -> int:
        try:
            with transaction.atomic():
                deleted, _ = model.objects.filter(pk=record_id).delete()
                return deleted
        except STORE_FAULTS as e:
            logger.exception(f"Delete from {model._meta.db_table} {record_id} failed: {e}")
            raise PersistenceError("delete", model) from e
