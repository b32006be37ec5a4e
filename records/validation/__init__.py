"""
Centralized Validation Module

Domain-specific schemas that turn raw submitted text into typed records.

Domains:
- Invoice: customer reference, amount, status
- Customer: name, email, picture
"""

from .schemas import (
    BaseSchema,
    CustomerSchema,
    FieldConstraints,
    InvoiceSchema,
    ParseResult,
)
from .errors import (
    ErrorCode,
    FieldError,
    ValidationError,
    flatten_field_errors,
)

__all__ = [
    "BaseSchema",
    "CustomerSchema",
    "FieldConstraints",
    "InvoiceSchema",
    "ParseResult",
    "ErrorCode",
    "FieldError",
    "ValidationError",
    "flatten_field_errors",
]
