"""
Records Services Layer

- Models: pure data + constraints
- Services: validation, persistence and cache invalidation for each action
- Views/APIs: request parsing, auth, mapping action results to responses
"""

from .action_result import ActionResult, FieldErrors, Message, Navigate
from .auth_service import AuthError, AuthService, CredentialsProvider
from .customer_service import CustomerService
from .dashboard_service import DashboardService
from .invoice_service import InvoiceService
from .mutation_service import MutationService
from .record_store import PersistenceError, RecordStore
from .view_cache import ViewCache

__all__ = [
    "ActionResult",
    "FieldErrors",
    "Message",
    "Navigate",
    "AuthError",
    "AuthService",
    "CredentialsProvider",
    "CustomerService",
    "DashboardService",
    "InvoiceService",
    "MutationService",
    "PersistenceError",
    "RecordStore",
    "ViewCache",
]
