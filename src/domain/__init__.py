"""Domain package for business rules and core models."""

from .constants import EXPENSE, INCOME, MONTH_LABELS
from .errors import (
    AuthenticationRequiredError,
    NumeraError,
    SchemaMismatchError,
)
from .models import (
    BankAccount,
    Company,
    CurrentUser,
    DashboardData,
    Invoice,
    InvoiceRow,
    TenantContext,
    Transaction,
)

__all__ = [
    "EXPENSE",
    "INCOME",
    "MONTH_LABELS",
    "AuthenticationRequiredError",
    "NumeraError",
    "SchemaMismatchError",
    "BankAccount",
    "Company",
    "CurrentUser",
    "DashboardData",
    "Invoice",
    "InvoiceRow",
    "TenantContext",
    "Transaction",
]
