"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
from importlib import import_module

import streamlit as st
import altair as alt

from src.domain.errors import AuthenticationRequiredError
from src.domain.models import (
    BankAccountData,
    CashFlowForecast,
    ChartDataPoint,
    DashboardData,
    HistoryDataPoint,
    RecentTransaction,
)
from src.domain.services.tax_budget import compute_budget_status
from src.infrastructure.container import build_get_dashboard_data_use_case
from src.infrastructure.logging.logger import get_usage_logger


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the dataframe stack used by Altair is importable.

    Returns:
        Tuple with a success flag and an error message when unusable.
    """
    try:
        numpy = import_module("numpy")
        pandas = import_module("pandas")
    except ImportError as exc:
        return False, f"Altair dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _fetch_dashboard_data(
    from_date: str | None,
    to_date: str | None,
) -> DashboardData:
    """Compose the dashboard for the configured user."""
    use_case = build_get_dashboard_data_use_case()
    return use_case.execute(from_date=from_date, to_date=to_date)


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard_data(
    from_date: str | None,
    to_date: str | None,
    schema_version: int = 1,
) -> DashboardData:
    """Cached wrapper around _fetch_dashboard_data."""
    _ = schema_version
    return _fetch_dashboard_data(from_date, to_date)


def _query_param(name: str) -> str | None:
    """Return a query parameter value, or None when absent or blank."""
    value = st.query_params.get(name)
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _format_currency(value: Decimal | None, currency_code: str = "EUR") -> str:
    """Format currency values for display."""
    if value is None:
        return "—"
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _render_kpis(data: DashboardData) -> None:
    """Render the headline metrics."""
    revenue_col, expenses_col, net_col, annual_col = st.columns(4)
    revenue_col.metric("Revenue", _format_currency(data.total_revenue))
    expenses_col.metric("Expenses", _format_currency(data.total_expenses))
    net_col.metric("Net income", _format_currency(data.net_income))
    annual_col.metric("Revenue YTD", _format_currency(data.annual_revenue))


def _render_tax_and_budget(data: DashboardData) -> None:
    """Render the tax provision and the budget gauge."""
    tax_col, budget_col = st.columns(2)
    with tax_col:
        st.subheader("Tax provision")
        st.metric(
            f"Provision ({data.tax_rate:.1f}%)",
            _format_currency(data.tax_amount),
        )
        st.caption(f"Net available: {_format_currency(data.net_available)}")

    with budget_col:
        st.subheader("Monthly budget")
        status = compute_budget_status(
            data.total_expenses,
            data.monthly_budget,
            data.budget_alert_threshold,
        )
        if status.state == "unconfigured":
            st.info("No monthly budget configured.")
            return
        used = min(float(data.budget_used_percent), 100.0) / 100.0
        st.progress(used, text=f"{data.budget_used_percent:.1f}% used")
        remaining = _format_currency(data.budget_remaining)
        if status.state == "critical":
            st.error(f"Budget almost exhausted: {remaining} remaining.")
        else:
            st.success(f"{remaining} remaining.")


def _prepare_daily_chart_data(
    points: Sequence[ChartDataPoint],
) -> list[dict[str, str | float]]:
    """Flatten daily buckets into one row per (day, series)."""
    data: list[dict[str, str | float]] = []
    for point in points:
        data.append(
            {
                "date": point.date,
                "series": "Recettes",
                "amount": float(point.recettes),
            }
        )
        data.append(
            {
                "date": point.date,
                "series": "Dépenses",
                "amount": float(point.depenses),
            }
        )
    return data


def _prepare_history_chart_data(
    points: Sequence[HistoryDataPoint],
) -> list[dict[str, str | float | int]]:
    """Flatten the 12-month history for a grouped bar chart."""
    data: list[dict[str, str | float | int]] = []
    for index, point in enumerate(points):
        data.append(
            {
                "month": point.name,
                "order": index,
                "series": "Income",
                "amount": float(point.income),
            }
        )
        data.append(
            {
                "month": point.name,
                "order": index,
                "series": "Expense",
                "amount": float(point.expense),
            }
        )
    return data


def _prepare_forecast_chart_data(
    forecast: CashFlowForecast,
) -> list[dict[str, str | float | int]]:
    """Return forecast points with a sortable key and display label.

    The last real point is repeated as projected so both lines join.
    """
    data: list[dict[str, str | float | int]] = []
    last_real = None
    for point in forecast.forecast_data:
        row = {
            "label": f"{point.date} {point.year}",
            "order": point.year * 12 + point.month,
            "solde": float(point.solde),
            "type": point.type,
        }
        if point.type == "real":
            last_real = row
        data.append(row)
    if last_real is not None and any(
        point.type == "projected" for point in forecast.forecast_data
    ):
        data.append({**last_real, "type": "projected"})
    return data


def _render_daily_chart(points: Sequence[ChartDataPoint]) -> None:
    """Render the daily income/expense area chart."""
    st.subheader("Daily activity")
    if not points:
        st.info("No activity in the selected period.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_daily_chart_data(points))
    ).mark_area(opacity=0.4, line=True).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("amount:Q", title="€", stack=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Recettes", "Dépenses"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=280)
    st.altair_chart(chart, width="stretch")


def _render_history_chart(points: Sequence[HistoryDataPoint]) -> None:
    """Render the trailing 12-month income and expense bars."""
    st.subheader("Last 12 months")
    chart = alt.Chart(
        alt.Data(values=_prepare_history_chart_data(points))
    ).mark_bar(cornerRadiusTopLeft=3, cornerRadiusTopRight=3).encode(
        x=alt.X(
            "month:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="€"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=["#1b9aaa", "#f4a261"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=280)
    st.altair_chart(chart, width="stretch")


def _render_forecast_chart(forecast: CashFlowForecast) -> None:
    """Render the real and projected balance lines."""
    st.subheader("Cash-flow forecast")
    if not forecast.forecast_data:
        st.info("Connect a bank account to see the forecast.")
        return
    if not forecast.has_enough_data:
        st.warning(
            "Not enough history yet: the projection may be unreliable."
        )
    chart = alt.Chart(
        alt.Data(values=_prepare_forecast_chart_data(forecast))
    ).mark_line(point=True).encode(
        x=alt.X(
            "label:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        y=alt.Y("solde:Q", title="€"),
        color=alt.Color(
            "type:N",
            scale=alt.Scale(
                domain=["real", "projected"],
                range=["#457b9d", "#f6c453"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        strokeDash=alt.condition(
            alt.datum.type == "projected",
            alt.value([6, 4]),
            alt.value([1, 0]),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("solde:Q", format=",.2f"),
        ],
    ).properties(height=280)
    st.altair_chart(chart, width="stretch")
    st.caption(
        f"Balance {_format_currency(forecast.current_balance)}, "
        f"burn rate {_format_currency(forecast.burn_rate)} / month"
    )


def _render_recent_transactions(
    transactions: Sequence[RecentTransaction],
) -> None:
    """Render the recent transactions table."""
    st.subheader("Recent transactions")
    if not transactions:
        st.info("No transactions in the selected period.")
        return
    data = [
        {
            "Date": tx.date.strftime("%Y-%m-%d"),
            "Description": tx.description or "—",
            "Category": tx.category,
            "Type": tx.type,
            "Amount": _format_currency(tx.amount),
            "Status": tx.status,
        }
        for tx in transactions
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_bank_accounts(accounts: Sequence[BankAccountData]) -> None:
    """Render connected bank accounts."""
    st.subheader("Bank accounts")
    if not accounts:
        st.info("No bank account connected.")
        return
    data = [
        {
            "Bank": account.bank_name,
            "Account": f"•••• {account.mask}" if account.mask else "—",
            "Balance": _format_currency(
                account.current_balance,
                account.currency,
            ),
        }
        for account in accounts
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Numera Dashboard", layout="wide")
    st.title("Numera Dashboard")

    from_date = _query_param("from")
    to_date = _query_param("to")
    get_usage_logger().info(
        f"Dashboard viewed: from={from_date}, to={to_date}"
    )

    try:
        data = _load_dashboard_data(from_date, to_date, schema_version=1)
    except AuthenticationRequiredError:
        st.warning("Please sign in to see your dashboard.")
        return

    _render_kpis(data)
    _render_tax_and_budget(data)

    charts_ok, charts_error = _check_altair_dependencies()
    if charts_ok:
        _render_daily_chart(data.chart_data)
        history_col, forecast_col = st.columns(2)
        with history_col:
            _render_history_chart(data.history_data)
        with forecast_col:
            _render_forecast_chart(data.cash_flow_forecast)
    else:
        st.error(charts_error)

    transactions_col, accounts_col = st.columns(2)
    with transactions_col:
        _render_recent_transactions(data.recent_transactions)
    with accounts_col:
        _render_bank_accounts(data.bank_accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
