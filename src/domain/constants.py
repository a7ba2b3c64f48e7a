"""Domain constants for dashboard analytics."""

from decimal import Decimal

INCOME = "INCOME"
EXPENSE = "EXPENSE"
TRANSACTION_TYPES = (INCOME, EXPENSE)

PENDING = "PENDING"
COMPLETED = "COMPLETED"

INVOICE_STATUS_SENT = "SENT"

DEFAULT_TAX_RATE = Decimal("22.0")
DEFAULT_MONTHLY_BUDGET = Decimal("0")
DEFAULT_BUDGET_ALERT_THRESHOLD = Decimal("100.0")
DEFAULT_CURRENCY = "EUR"

DEFAULT_CHART_MAX_DAYS = 90
DEFAULT_FORECAST_HORIZON_MONTHS = 6
DEFAULT_FORECAST_LOOKBACK_MONTHS = 3
DEFAULT_FORECAST_MIN_HISTORY_MONTHS = 3
DEFAULT_RECENT_TRANSACTIONS_LIMIT = 5
HISTORY_MONTHS = 12

MONTH_LABELS = (
    "Jan",
    "Fév",
    "Mar",
    "Avr",
    "Mai",
    "Jun",
    "Jul",
    "Aoû",
    "Sep",
    "Oct",
    "Nov",
    "Déc",
)


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "PENDING",
    "COMPLETED",
    "INVOICE_STATUS_SENT",
    "DEFAULT_TAX_RATE",
    "DEFAULT_MONTHLY_BUDGET",
    "DEFAULT_BUDGET_ALERT_THRESHOLD",
    "DEFAULT_CURRENCY",
    "DEFAULT_CHART_MAX_DAYS",
    "DEFAULT_FORECAST_HORIZON_MONTHS",
    "DEFAULT_FORECAST_LOOKBACK_MONTHS",
    "DEFAULT_FORECAST_MIN_HISTORY_MONTHS",
    "DEFAULT_RECENT_TRANSACTIONS_LIMIT",
    "HISTORY_MONTHS",
    "MONTH_LABELS",
]
