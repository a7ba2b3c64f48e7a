"""Tax provisioning and monthly budget computations."""

from decimal import Decimal

from src.domain.constants import DEFAULT_TAX_RATE
from src.domain.models import BudgetStatus, TaxProvision
from src.utils.decimal_utils import coerce_decimal


def compute_tax_provision(
    total_revenue: Decimal,
    tax_rate: Decimal | None = None,
) -> TaxProvision:
    """Return the tax to set aside on revenue.

    Args:
        total_revenue: Revenue of the period.
        tax_rate: Rate in percent; defaults to 22.0 when unset.

    Returns:
        TaxProvision: Rate used, tax amount and net available.
    """
    rate = DEFAULT_TAX_RATE if tax_rate is None else coerce_decimal(tax_rate)
    revenue = coerce_decimal(total_revenue)
    tax_amount = revenue * rate / Decimal("100")
    return TaxProvision(
        tax_rate=rate,
        tax_amount=tax_amount,
        net_available=revenue - tax_amount,
    )


def compute_budget_status(
    total_expenses: Decimal,
    monthly_budget: Decimal,
    budget_alert_threshold: Decimal,
) -> BudgetStatus:
    """Return how much of the monthly budget has been used.

    A budget of zero means the company has not configured one: the usage is
    0% and the status is never critical.

    Args:
        total_expenses: Expenses of the period.
        monthly_budget: Configured monthly budget.
        budget_alert_threshold: Remaining amount under which to alert.

    Returns:
        BudgetStatus: Usage percent, remaining amount (may be negative)
        and critical flag.
    """
    expenses = coerce_decimal(total_expenses)
    budget = coerce_decimal(monthly_budget)
    threshold = coerce_decimal(budget_alert_threshold)
    used_percent = (
        expenses / budget * Decimal("100") if budget > 0 else Decimal("0")
    )
    remaining = budget - expenses
    return BudgetStatus(
        monthly_budget=budget,
        budget_alert_threshold=threshold,
        budget_used_percent=used_percent,
        budget_remaining=remaining,
        is_critical=budget > 0 and remaining < threshold,
    )


__all__ = ["compute_tax_provision", "compute_budget_status"]
