"""
Record Validation Schemas

Declarative field rules for the values submitted by the dashboard forms and
the API. Server is authoritative; the forms only mirror these constraints.

Each schema provides:
- Field constraints (required, coercion, length, format, choices, bounds)
- A user-facing message per constraint
- validate() returning every failure in one pass, parse() raising on failure
- omit() to derive create/update schemas without server-assigned fields
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from .errors import ErrorCode, FieldError, ValidationError, flatten_field_errors

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
CENT = Decimal("0.01")
# Largest amount whose cents fit the invoice amount column.
MAX_AMOUNT = Decimal("21474836.47")


def parse_decimal(value: str) -> Decimal:
    number = Decimal(value)
    if not number.is_finite():
        raise ValueError(f"{value!r} is not a finite number")
    return number


def parse_amount(value: str) -> Decimal:
    """Dollar amount rounded half-up to whole cents; out-of-range values are left for the bound check."""
    number = parse_decimal(value)
    if abs(number) > MAX_AMOUNT:
        return number
    return number.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_uuid(value: str) -> uuid.UUID:
    return uuid.UUID(value)


@dataclass
class FieldConstraints:
    message: str
    required: bool = True
    trim: bool = False
    coerce: Optional[Callable[[str], Any]] = None
    coerce_message: Optional[str] = None
    max_length: Optional[int] = None
    max_length_message: Optional[str] = None
    gt: Optional[Decimal] = None
    lte: Optional[Decimal] = None
    lte_message: Optional[str] = None
    pattern: Optional[str] = None
    choices: Optional[List[str]] = None


@dataclass
class ParseResult:
    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def field_errors(self) -> Dict[str, List[str]]:
        return flatten_field_errors(self.errors)


class BaseSchema:
    FIELDS: Dict[str, FieldConstraints] = {}
    FAILURE_MESSAGE = "Validation failed. Please check your input."

    @classmethod
    def validate(cls, data: Mapping[str, Any]) -> ParseResult:
        cleaned: Dict[str, Any] = {}
        errors: List[FieldError] = []

        for field_name, constraints in cls.FIELDS.items():
            value, field_errors = cls._validate_field(field_name, data.get(field_name), constraints)
            if field_errors:
                errors.extend(field_errors)
            elif value is not None:
                cleaned[field_name] = value

        if errors:
            return ParseResult(success=False, errors=errors)
        return ParseResult(success=True, data=cleaned)

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        result = cls.validate(data)
        if not result.success:
            raise ValidationError(message=cls.FAILURE_MESSAGE, fields=result.errors)
        return result.data

    @classmethod
    def omit(cls, *field_names: str) -> Type["BaseSchema"]:
        unknown = [name for name in field_names if name not in cls.FIELDS]
        if unknown:
            raise KeyError(f"{cls.__name__} has no field(s): {', '.join(unknown)}")
        fields = {name: rule for name, rule in cls.FIELDS.items() if name not in field_names}
        return type(cls.__name__, (cls,), {"FIELDS": fields})

    @classmethod
    def _validate_field(
        cls,
        field_name: str,
        value: Any,
        constraints: FieldConstraints,
    ) -> Tuple[Any, List[FieldError]]:
        if value is not None and not isinstance(value, str):
            value = str(value)
        if value is not None and constraints.trim:
            value = value.strip()

        if value is None or value == "":
            if constraints.required:
                return None, [FieldError(field_name, ErrorCode.FIELD_REQUIRED.value, constraints.message)]
            return None, []

        if constraints.coerce is not None:
            try:
                value = constraints.coerce(value)
            except (InvalidOperation, ValueError, TypeError):
                return None, [FieldError(
                    field_name,
                    ErrorCode.FIELD_INVALID.value,
                    constraints.coerce_message or constraints.message,
                )]

        errors = []

        if constraints.max_length is not None and len(value) > constraints.max_length:
            errors.append(FieldError(
                field_name,
                ErrorCode.FIELD_TOO_LONG.value,
                constraints.max_length_message or constraints.message,
            ))

        if constraints.pattern and not re.fullmatch(constraints.pattern, value):
            errors.append(FieldError(field_name, ErrorCode.FIELD_INVALID_FORMAT.value, constraints.message))

        if constraints.choices is not None and value not in constraints.choices:
            errors.append(FieldError(field_name, ErrorCode.FIELD_INVALID_CHOICE.value, constraints.message))

        if constraints.gt is not None and not value > constraints.gt:
            errors.append(FieldError(field_name, ErrorCode.FIELD_OUT_OF_RANGE.value, constraints.message))

        if constraints.lte is not None and value > constraints.lte:
            errors.append(FieldError(
                field_name,
                ErrorCode.FIELD_OUT_OF_RANGE.value,
                constraints.lte_message or constraints.message,
            ))

        return value, errors


class InvoiceSchema(BaseSchema):
    STATUS_CHOICES = ["pending", "paid"]

    FIELDS = {
        "id": FieldConstraints(
            message="Invalid invoice identifier.",
            coerce=parse_uuid,
        ),
        "customer_id": FieldConstraints(
            message="Please select a customer.",
            trim=True,
            coerce=parse_uuid,
        ),
        "amount": FieldConstraints(
            message="Please enter an amount greater than $0.",
            trim=True,
            coerce=parse_amount,
            coerce_message="Please enter a valid amount.",
            gt=Decimal("0"),
            lte=MAX_AMOUNT,
            lte_message="Please enter an amount of at most $21,474,836.47.",
        ),
        "status": FieldConstraints(
            message="Please select an invoice status.",
            choices=STATUS_CHOICES,
        ),
        "date": FieldConstraints(
            message="Please enter a valid date.",
            coerce=date.fromisoformat,
        ),
    }


class CustomerSchema(BaseSchema):
    FIELDS = {
        "id": FieldConstraints(
            message="Invalid customer identifier.",
            coerce=parse_uuid,
        ),
        "name": FieldConstraints(
            message="Please enter customer name.",
            trim=True,
            max_length=255,
            max_length_message="Customer name must be at most 255 characters.",
        ),
        "email": FieldConstraints(
            message="Please enter customer email.",
            trim=True,
            max_length=254,
            max_length_message="Customer email must be at most 254 characters.",
            pattern=EMAIL_PATTERN,
        ),
        "picture": FieldConstraints(
            message="Please enter customer picture URL.",
            trim=True,
            max_length=255,
            max_length_message="Customer picture URL must be at most 255 characters.",
        ),
    }
