"""Domain models package."""

from .dashboard import (
    BankAccountData,
    BudgetStatus,
    CashFlowForecast,
    ChartDataPoint,
    DashboardData,
    ForecastDataPoint,
    HistoryDataPoint,
    MonthWindow,
    PeriodTotals,
    RecentTransaction,
    ReportingPeriod,
    TaxProvision,
)
from .ledger import (
    BankAccount,
    Company,
    CurrentUser,
    Invoice,
    InvoiceRow,
    TenantContext,
    Transaction,
)

__all__ = [
    "BankAccount",
    "Company",
    "CurrentUser",
    "Invoice",
    "InvoiceRow",
    "TenantContext",
    "Transaction",
    "BankAccountData",
    "BudgetStatus",
    "CashFlowForecast",
    "ChartDataPoint",
    "DashboardData",
    "ForecastDataPoint",
    "HistoryDataPoint",
    "MonthWindow",
    "PeriodTotals",
    "RecentTransaction",
    "ReportingPeriod",
    "TaxProvision",
]
