"""Domain services package."""

from .aggregation import (
    aggregate_period,
    annual_revenue,
    build_daily_series,
    empty_history,
    group_by_month,
    trailing_twelve_months,
)
from .forecast import compute_burn_rate, forecast
from .invoices import (
    expected_invoice_inflows,
    invoice_total,
    invoice_total_with_vat,
)
from .periods import (
    current_month_period,
    resolve_reporting_period,
    trailing_month_windows,
)
from .revenue import is_revenue, normalize_keywords
from .tax_budget import compute_budget_status, compute_tax_provision
from .validation import validate_transactions

__all__ = [
    "aggregate_period",
    "annual_revenue",
    "build_daily_series",
    "empty_history",
    "group_by_month",
    "trailing_twelve_months",
    "compute_burn_rate",
    "forecast",
    "expected_invoice_inflows",
    "invoice_total",
    "invoice_total_with_vat",
    "current_month_period",
    "resolve_reporting_period",
    "trailing_month_windows",
    "is_revenue",
    "normalize_keywords",
    "compute_budget_status",
    "compute_tax_provision",
    "validate_transactions",
]
