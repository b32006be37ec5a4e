"""
Validation error types.

A schema reports problems as a flat list of FieldError; forms and the API
consume them flattened to { field: [message, ...] }, preserving the order in
which rules failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_INVALID = "FIELD_INVALID"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    FIELD_OUT_OF_RANGE = "FIELD_OUT_OF_RANGE"
    FIELD_INVALID_FORMAT = "FIELD_INVALID_FORMAT"
    FIELD_INVALID_CHOICE = "FIELD_INVALID_CHOICE"

    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


@dataclass
class FieldError:
    field: str
    code: str
    message: str


def flatten_field_errors(errors: List[FieldError]) -> Dict[str, List[str]]:
    flattened: Dict[str, List[str]] = {}
    for error in errors:
        flattened.setdefault(error.field, []).append(error.message)
    return flattened


class ValidationError(Exception):
    def __init__(self, message: str, fields: List[FieldError]):
        self.message = message
        self.fields = fields
        super().__init__(message)

    @property
    def field_errors(self) -> Dict[str, List[str]]:
        return flatten_field_errors(self.fields)
