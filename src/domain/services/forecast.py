"""Cash-flow forecasting from the historical burn rate.

The projection is linear: every future month loses the average net outflow
of the observed months and gains the invoices expected to be paid that
month. Observed months are rebuilt backwards from the current balance so
the real and projected series join at the current month.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_FORECAST_HORIZON_MONTHS,
    DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
)
from src.domain.models import CashFlowForecast, ForecastDataPoint
from src.domain.services.periods import month_label, shift_month
from src.utils.decimal_utils import coerce_decimal, quantize_cents


def compute_burn_rate(historical_monthly_net: Sequence[Decimal]) -> Decimal:
    """Return the average monthly net outflow.

    A positive value means the balance decreases over time.
    """
    if not historical_monthly_net:
        return Decimal("0")
    total = sum(
        (coerce_decimal(value) for value in historical_monthly_net),
        Decimal("0"),
    )
    return -(total / len(historical_monthly_net))


def forecast(
    current_balance: Decimal | None,
    historical_monthly_net: Sequence[Decimal],
    horizon_months: int = DEFAULT_FORECAST_HORIZON_MONTHS,
    *,
    as_of: date,
    min_history_months: int = DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
    expected_inflows: Mapping[tuple[int, int], Decimal] | None = None,
) -> CashFlowForecast:
    """Project the balance ``horizon_months`` ahead.

    Args:
        current_balance: Balance today, or None when no bank is connected.
        historical_monthly_net: Net (income - expense) per observed month,
            oldest first, the last entry being ``as_of``'s month.
        horizon_months: Number of projected months.
        as_of: Reference day; projections start the following month.
        min_history_months: Non-zero months required for a reliable
            projection.
        expected_inflows: Amounts expected per (year, month), such as
            invoices due.

    Returns:
        CashFlowForecast: Real and projected points with the burn rate.
        An empty forecast is returned when the balance is unknown.
    """
    if current_balance is None:
        return CashFlowForecast.empty()

    balance = coerce_decimal(current_balance)
    nets = [coerce_decimal(value) for value in historical_monthly_net]
    burn_rate = quantize_cents(compute_burn_rate(nets))
    active_months = sum(1 for value in nets if value != 0)
    inflows = expected_inflows or {}

    real_points: list[ForecastDataPoint] = []
    running = balance
    for offset, net in enumerate(reversed(nets)):
        year, month = shift_month(as_of.year, as_of.month, -offset)
        real_points.append(
            ForecastDataPoint(
                date=month_label(month),
                solde=quantize_cents(running),
                type="real",
                month=month,
                year=year,
            )
        )
        running -= net
    real_points.reverse()

    projected_points: list[ForecastDataPoint] = []
    projected = balance
    for offset in range(1, horizon_months + 1):
        year, month = shift_month(as_of.year, as_of.month, offset)
        projected = (
            projected
            - burn_rate
            + coerce_decimal(inflows.get((year, month)))
        )
        projected_points.append(
            ForecastDataPoint(
                date=month_label(month),
                solde=quantize_cents(projected),
                type="projected",
                month=month,
                year=year,
            )
        )

    return CashFlowForecast(
        forecast_data=real_points + projected_points,
        current_balance=balance,
        burn_rate=burn_rate,
        has_enough_data=active_months >= min_history_months,
    )


__all__ = ["compute_burn_rate", "forecast"]
