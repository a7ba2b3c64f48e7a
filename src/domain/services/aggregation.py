"""Domain services aggregating transactions for the dashboard."""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_CHART_MAX_DAYS,
    EXPENSE,
    HISTORY_MONTHS,
    INCOME,
)
from src.domain.models import (
    ChartDataPoint,
    HistoryDataPoint,
    MonthWindow,
    PeriodTotals,
    Transaction,
)
from src.domain.services.periods import as_naive_utc, utc_day_key
from src.domain.services.revenue import is_revenue, normalize_keywords
from src.utils.decimal_utils import coerce_decimal


def _sum_amounts(transactions: Iterable[Transaction]) -> Decimal:
    return sum(
        (coerce_decimal(tx.amount) for tx in transactions),
        Decimal("0"),
    )


def aggregate_period(
    transactions: Sequence[Transaction],
    keywords: str | Iterable[str] | None,
) -> PeriodTotals:
    """Compute revenue and expense totals for a period.

    Transactions are expected to be filtered to the period by the caller.

    Args:
        transactions: Period transactions.
        keywords: Company revenue keywords.

    Returns:
        PeriodTotals: Revenue (keyword-filtered), expenses and net income.
    """
    normalized = normalize_keywords(keywords)
    total_revenue = _sum_amounts(
        tx for tx in transactions if is_revenue(tx, normalized)
    )
    total_expenses = _sum_amounts(
        tx for tx in transactions if tx.type == EXPENSE
    )
    return PeriodTotals(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
    )


def build_daily_series(
    transactions: Iterable[Transaction],
    range_start: datetime,
    range_end: datetime,
    max_days: int = DEFAULT_CHART_MAX_DAYS,
) -> list[ChartDataPoint]:
    """Bucket transactions per UTC day over a zero-filled range.

    Every INCOME transaction feeds ``recettes`` regardless of revenue
    keywords, so the chart may differ from the headline revenue.

    Args:
        transactions: Transactions to bucket.
        range_start: First day of the range.
        range_end: Last day of the range (inclusive).
        max_days: Maximum number of buckets generated.

    Returns:
        list[ChartDataPoint]: One point per day, ascending, no gaps.
    """
    first_day = as_naive_utc(range_start).date()
    last_day = as_naive_utc(range_end).date()
    span = (last_day - first_day).days + 1
    bucket_count = max(0, min(span, max_days))

    recettes: dict[str, Decimal] = {}
    depenses: dict[str, Decimal] = {}
    for offset in range(bucket_count):
        key = (first_day + timedelta(days=offset)).isoformat()
        recettes[key] = Decimal("0")
        depenses[key] = Decimal("0")

    for tx in transactions:
        key = utc_day_key(tx.date)
        if key not in recettes:
            continue
        amount = coerce_decimal(tx.amount)
        if tx.type == INCOME:
            recettes[key] += amount
        elif tx.type == EXPENSE:
            depenses[key] += amount

    return [
        ChartDataPoint(date=key, recettes=recettes[key], depenses=depenses[key])
        for key in sorted(recettes)
    ]


def annual_revenue(
    transactions: Iterable[Transaction],
    keywords: str | Iterable[str] | None,
    year_start: datetime,
    now: datetime,
) -> Decimal:
    """Return year-to-date revenue.

    Args:
        transactions: Candidate transactions (any type).
        keywords: Company revenue keywords.
        year_start: January 1st of the current year.
        now: Upper bound, inclusive.

    Returns:
        Decimal: Sum of classified revenue between the bounds.
    """
    normalized = normalize_keywords(keywords)
    lower = as_naive_utc(year_start)
    upper = as_naive_utc(now)
    return _sum_amounts(
        tx
        for tx in transactions
        if tx.type == INCOME
        and lower <= as_naive_utc(tx.date) <= upper
        and is_revenue(tx, normalized)
    )


def group_by_month(
    transactions: Iterable[Transaction],
    windows: Sequence[MonthWindow],
) -> list[list[Transaction]]:
    """Split transactions into the given month windows.

    Transactions outside every window are dropped.

    Returns:
        list[list[Transaction]]: One list per window, in window order.
    """
    buckets: list[list[Transaction]] = [[] for _ in windows]
    index_by_month = {
        (window.year, window.month): index
        for index, window in enumerate(windows)
    }
    for tx in transactions:
        moment = as_naive_utc(tx.date)
        index = index_by_month.get((moment.year, moment.month))
        if index is not None:
            buckets[index].append(tx)
    return buckets


def trailing_twelve_months(
    per_month_transactions: Sequence[Sequence[Transaction]],
    month_labels: Sequence[str],
    keywords: str | Iterable[str] | None = None,
) -> list[HistoryDataPoint]:
    """Compute the 12-month income/expense/net history.

    Args:
        per_month_transactions: Transactions of each month, oldest first.
        month_labels: Labels of the same months, oldest first.
        keywords: Company revenue keywords.

    Returns:
        list[HistoryDataPoint]: Exactly 12 points, oldest first.

    Raises:
        ValueError: If the labels do not describe 12 months.
    """
    if len(month_labels) != HISTORY_MONTHS:
        raise ValueError(
            f"Expected {HISTORY_MONTHS} month labels, got {len(month_labels)}"
        )
    normalized = normalize_keywords(keywords)
    history: list[HistoryDataPoint] = []
    for index, label in enumerate(month_labels):
        month_transactions = (
            per_month_transactions[index]
            if index < len(per_month_transactions)
            else []
        )
        totals = aggregate_period(month_transactions, normalized)
        history.append(
            HistoryDataPoint(
                name=label,
                income=totals.total_revenue,
                expense=totals.total_expenses,
                net=totals.net_income,
            )
        )
    return history


def empty_history(month_labels: Sequence[str]) -> list[HistoryDataPoint]:
    """Return zero-filled history points for the given labels."""
    return [HistoryDataPoint(name=label) for label in month_labels]


__all__ = [
    "aggregate_period",
    "build_daily_series",
    "annual_revenue",
    "group_by_month",
    "trailing_twelve_months",
    "empty_history",
]
