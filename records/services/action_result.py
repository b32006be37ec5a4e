"""
Outcomes of a mutation action.

Every action returns exactly one of:
- FieldErrors: the submission was rejected by its schema
- Message: a user-facing notice (persistence failure, or a completed delete)
- Navigate: the mutation succeeded and the caller should move to ``path``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ActionResult:
    def to_state(self) -> Dict[str, Any]:
        """Form state rendered next to the inputs: {"errors": {...}, "message": ...}."""
        return {"errors": {}, "message": None}


@dataclass(frozen=True)
class FieldErrors(ActionResult):
    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: str = ""

    def to_state(self) -> Dict[str, Any]:
        return {"errors": self.errors, "message": self.message}


@dataclass(frozen=True)
class Message(ActionResult):
    message: str = ""
    ok: bool = False

    def to_state(self) -> Dict[str, Any]:
        return {"errors": {}, "message": self.message}


@dataclass(frozen=True)
class Navigate(ActionResult):
    path: str = "/"
