"""Domain models for ledger entities read by the dashboard."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.constants import (
    COMPLETED,
    DEFAULT_BUDGET_ALERT_THRESHOLD,
    DEFAULT_CURRENCY,
    DEFAULT_MONTHLY_BUDGET,
    DEFAULT_TAX_RATE,
)


@dataclass(frozen=True)
class Company:
    """Tenant whose books are reported on.

    Attributes:
        id: Company identifier.
        name: Display name.
        tax_rate: Tax provisioning rate in percent.
        revenue_keywords: Optional comma-separated revenue allow-list.
        monthly_budget: Monthly expense budget, 0 when unconfigured.
        budget_alert_threshold: Minimum remaining budget before alerting.
    """

    id: str
    name: str = ""
    tax_rate: Decimal | None = DEFAULT_TAX_RATE
    revenue_keywords: str | None = None
    monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET
    budget_alert_threshold: Decimal = DEFAULT_BUDGET_ALERT_THRESHOLD


@dataclass(frozen=True)
class Transaction:
    """Ledger movement; direction is carried by ``type``, never the sign."""

    id: str
    company_id: str
    date: datetime
    amount: Decimal
    type: str
    description: str | None = None
    category: str = "AUTRE"
    status: str = COMPLETED


@dataclass(frozen=True)
class BankAccount:
    """Snapshot of a connected bank account."""

    id: str
    user_id: str
    bank_name: str
    mask: str | None = None
    current_balance: Decimal | None = None
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True)
class InvoiceRow:
    """Invoice line used to compute invoice totals."""

    quantity: Decimal
    unit_price: Decimal
    vat_rate: Decimal = Decimal("0")


@dataclass(frozen=True)
class Invoice:
    """Invoice header with its rows."""

    id: str
    number: str
    status: str
    due_date: datetime | None = None
    rows: list[InvoiceRow] = field(default_factory=list)


@dataclass(frozen=True)
class CurrentUser:
    """Signed-in user as returned by the identity provider."""

    id: str
    companies: list[Company] = field(default_factory=list)


@dataclass(frozen=True)
class TenantContext:
    """Explicit tenant passed to every dashboard sub-aggregation."""

    user_id: str
    company: Company

    @property
    def company_id(self) -> str:
        return self.company.id


__all__ = [
    "Company",
    "Transaction",
    "BankAccount",
    "InvoiceRow",
    "Invoice",
    "CurrentUser",
    "TenantContext",
]
