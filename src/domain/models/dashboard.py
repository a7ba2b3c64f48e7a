"""Domain models for dashboard aggregates.

Amounts are ``Decimal`` throughout; ``DashboardData.to_dict`` renders the
camelCase payload consumed by presentation layers, with floats for amounts.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from src.domain.constants import (
    DEFAULT_BUDGET_ALERT_THRESHOLD,
    DEFAULT_MONTHLY_BUDGET,
    DEFAULT_TAX_RATE,
)

ZERO = Decimal("0")

ForecastPointType = Literal["real", "projected"]
BudgetState = Literal["unconfigured", "critical", "healthy"]


def _money(value: Decimal) -> float:
    return float(value)


@dataclass(frozen=True)
class ReportingPeriod:
    """Inclusive reporting range.

    Attributes:
        start: First instant of the period.
        end: Last instant of the period (end of day).
        is_default: True when the current month was used as a fallback.
    """

    start: datetime
    end: datetime
    is_default: bool = False


@dataclass(frozen=True)
class MonthWindow:
    """Calendar month used by trailing-window aggregations."""

    year: int
    month: int
    start: datetime
    end: datetime
    label: str


@dataclass(frozen=True)
class PeriodTotals:
    """Headline totals for a period."""

    total_revenue: Decimal = ZERO
    total_expenses: Decimal = ZERO

    @property
    def net_income(self) -> Decimal:
        """Return total_revenue minus total_expenses."""
        return self.total_revenue - self.total_expenses


@dataclass(frozen=True)
class TaxProvision:
    """Tax set aside on revenue."""

    tax_rate: Decimal
    tax_amount: Decimal
    net_available: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    """Monthly budget utilisation."""

    monthly_budget: Decimal
    budget_alert_threshold: Decimal
    budget_used_percent: Decimal
    budget_remaining: Decimal
    is_critical: bool

    @property
    def state(self) -> BudgetState:
        """Return the display state of the budget."""
        if self.monthly_budget <= 0:
            return "unconfigured"
        if self.is_critical:
            return "critical"
        return "healthy"


@dataclass(frozen=True)
class ChartDataPoint:
    """Daily income/expense bucket."""

    date: str
    recettes: Decimal = ZERO
    depenses: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "recettes": _money(self.recettes),
            "depenses": _money(self.depenses),
        }


@dataclass(frozen=True)
class HistoryDataPoint:
    """Monthly income, expense and net for the trailing window."""

    name: str
    income: Decimal = ZERO
    expense: Decimal = ZERO
    net: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "income": _money(self.income),
            "expense": _money(self.expense),
            "net": _money(self.net),
        }


@dataclass(frozen=True)
class ForecastDataPoint:
    """Observed or projected month-end balance.

    Attributes:
        date: French month label of the point.
        solde: Balance at the end of the month.
        type: ``real`` for observed months, ``projected`` for future ones.
        month: Calendar month (1-12).
        year: Calendar year.
    """

    date: str
    solde: Decimal
    type: ForecastPointType
    month: int
    year: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "solde": _money(self.solde),
            "type": self.type,
            "month": self.month,
            "year": self.year,
        }


@dataclass(frozen=True)
class CashFlowForecast:
    """Balance projection built from the historical burn rate."""

    forecast_data: list[ForecastDataPoint] = field(default_factory=list)
    current_balance: Decimal = ZERO
    burn_rate: Decimal = ZERO
    has_enough_data: bool = False

    @classmethod
    def empty(cls) -> "CashFlowForecast":
        """Return the structurally valid forecast used when data is absent."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {
            "forecastData": [point.to_dict() for point in self.forecast_data],
            "currentBalance": _money(self.current_balance),
            "burnRate": _money(self.burn_rate),
            "hasEnoughData": self.has_enough_data,
        }


@dataclass(frozen=True)
class BankAccountData:
    """Bank account snapshot for display."""

    id: str
    bank_name: str
    mask: str | None
    current_balance: Decimal | None
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bankName": self.bank_name,
            "mask": self.mask,
            "currentBalance": (
                None
                if self.current_balance is None
                else _money(self.current_balance)
            ),
            "currency": self.currency,
        }


@dataclass(frozen=True)
class RecentTransaction:
    """Transaction row shown in the recent activity table."""

    id: str
    date: datetime
    amount: Decimal
    description: str | None
    type: str
    category: str
    status: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "amount": _money(self.amount),
            "description": self.description,
            "type": self.type,
            "category": self.category,
            "status": self.status,
        }


@dataclass(frozen=True)
class DashboardData:
    """Aggregate response rendered by the dashboard."""

    total_revenue: Decimal = ZERO
    total_expenses: Decimal = ZERO
    net_income: Decimal = ZERO
    annual_revenue: Decimal = ZERO
    tax_amount: Decimal = ZERO
    net_available: Decimal = ZERO
    tax_rate: Decimal = DEFAULT_TAX_RATE
    monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET
    budget_alert_threshold: Decimal = DEFAULT_BUDGET_ALERT_THRESHOLD
    budget_used_percent: Decimal = ZERO
    budget_remaining: Decimal = ZERO
    bank_accounts: list[BankAccountData] = field(default_factory=list)
    recent_transactions: list[RecentTransaction] = field(default_factory=list)
    chart_data: list[ChartDataPoint] = field(default_factory=list)
    history_data: list[HistoryDataPoint] = field(default_factory=list)
    cash_flow_forecast: CashFlowForecast = field(
        default_factory=CashFlowForecast.empty
    )

    @classmethod
    def empty(
        cls,
        month_labels: Sequence[str] = (),
    ) -> "DashboardData":
        """Return the zeroed dashboard rendered when composition fails.

        Args:
            month_labels: Labels of the trailing months, oldest first; one
                zeroed history point is created per label.
        """
        return cls(
            history_data=[HistoryDataPoint(name=label) for label in month_labels]
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase payload for presentation layers."""
        return {
            "totalRevenue": _money(self.total_revenue),
            "totalExpenses": _money(self.total_expenses),
            "netIncome": _money(self.net_income),
            "annualRevenue": _money(self.annual_revenue),
            "taxAmount": _money(self.tax_amount),
            "netAvailable": _money(self.net_available),
            "taxRate": _money(self.tax_rate),
            "monthlyBudget": _money(self.monthly_budget),
            "budgetAlertThreshold": _money(self.budget_alert_threshold),
            "budgetUsedPercent": _money(self.budget_used_percent),
            "budgetRemaining": _money(self.budget_remaining),
            "bankAccounts": [acc.to_dict() for acc in self.bank_accounts],
            "recentTransactions": [
                tx.to_dict() for tx in self.recent_transactions
            ],
            "chartData": [point.to_dict() for point in self.chart_data],
            "historyData": [point.to_dict() for point in self.history_data],
            "cashFlowForecast": self.cash_flow_forecast.to_dict(),
        }


__all__ = [
    "ReportingPeriod",
    "MonthWindow",
    "PeriodTotals",
    "TaxProvision",
    "BudgetStatus",
    "ChartDataPoint",
    "HistoryDataPoint",
    "ForecastDataPoint",
    "CashFlowForecast",
    "BankAccountData",
    "RecentTransaction",
    "DashboardData",
]
