"""Tests for the Streamlit app module."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.errors import AuthenticationRequiredError
from src.domain.models import (
    BankAccountData,
    CashFlowForecast,
    ChartDataPoint,
    DashboardData,
    ForecastDataPoint,
    RecentTransaction,
)


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self._owner = owner

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def metric(self, label, value, *args, **kwargs):
        self._owner.metrics.append((label, value))


class _FakeStreamlit:
    def __init__(self, query_params=None) -> None:
        self.query_params = dict(query_params or {})
        self.metrics: list[tuple[str, str]] = []
        self.messages: list[tuple[str, str]] = []
        self.charts = []
        self.tables = []
        self.progress_values = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def subheader(self, text: str):
        self.messages.append(("subheader", text))

    def metric(self, label, value, *args, **kwargs):
        self.metrics.append((label, value))

    def caption(self, text: str):
        self.messages.append(("caption", text))

    def info(self, text: str):
        self.messages.append(("info", text))

    def warning(self, text: str):
        self.messages.append(("warning", text))

    def error(self, text: str):
        self.messages.append(("error", text))

    def success(self, text: str):
        self.messages.append(("success", text))

    def progress(self, value, text=None):
        self.progress_values.append(value)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)

    def dataframe(self, data, **kwargs):
        self.tables.append((data, kwargs))


def _dashboard() -> DashboardData:
    return DashboardData(
        total_revenue=Decimal("1000"),
        total_expenses=Decimal("950"),
        net_income=Decimal("50"),
        tax_rate=Decimal("20"),
        tax_amount=Decimal("200"),
        net_available=Decimal("800"),
        monthly_budget=Decimal("1000"),
        budget_alert_threshold=Decimal("100"),
        budget_used_percent=Decimal("95"),
        budget_remaining=Decimal("50"),
        chart_data=[
            ChartDataPoint("2024-03-07", Decimal("0"), Decimal("950")),
        ],
        bank_accounts=[
            BankAccountData(
                id="acc-1",
                bank_name="Qonto",
                mask="1234",
                current_balance=Decimal("5000"),
                currency="EUR",
            )
        ],
        recent_transactions=[
            RecentTransaction(
                id="t1",
                date=datetime(2024, 3, 7),
                amount=Decimal("950"),
                description="Loyer",
                type="EXPENSE",
                category="LOYER",
                status="COMPLETED",
            )
        ],
        cash_flow_forecast=CashFlowForecast(
            forecast_data=[
                ForecastDataPoint("Mar", Decimal("5000"), "real", 3, 2024),
                ForecastDataPoint("Avr", Decimal("5150"), "projected", 4, 2024),
            ],
            current_balance=Decimal("5000"),
            burn_rate=Decimal("-150"),
            has_enough_data=False,
        ),
    )


def _install(monkeypatch, fake_st, loader):
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard_data", loader)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(app, "_check_altair_dependencies", lambda: (True, None))


def test_fetch_dashboard_data_invokes_use_case(monkeypatch):
    """_fetch_dashboard_data should forward the period to the use case."""
    use_case = MagicMock()
    use_case.execute.return_value = "data"
    monkeypatch.setattr(
        app,
        "build_get_dashboard_data_use_case",
        lambda: use_case,
    )

    result = app._fetch_dashboard_data("2024-01-01", "2024-01-31")

    assert result == "data"
    use_case.execute.assert_called_once_with(
        from_date="2024-01-01",
        to_date="2024-01-31",
    )


def test_main_renders_sections(monkeypatch):
    """main should pass query params and render every section."""
    fake_st = _FakeStreamlit({"from": "2024-03-01", "to": " 2024-03-31 "})
    calls = []

    def _loader(from_date, to_date, schema_version=1):
        calls.append((from_date, to_date))
        return _dashboard()

    _install(monkeypatch, fake_st, _loader)

    app.main()

    assert calls == [("2024-03-01", "2024-03-31")]
    assert ("Revenue", "1,000.00 €") in fake_st.metrics
    assert ("Provision (20.0%)", "200.00 €") in fake_st.metrics
    assert fake_st.progress_values == [0.95]
    assert any(kind == "error" for kind, _ in fake_st.messages)
    assert any(
        kind == "warning" and "history" in text
        for kind, text in fake_st.messages
    )
    assert len(fake_st.charts) == 3
    transactions, _ = fake_st.tables[0]
    assert transactions[0]["Description"] == "Loyer"
    accounts, _ = fake_st.tables[1]
    assert accounts[0]["Account"] == "•••• 1234"


def test_main_asks_for_sign_in(monkeypatch):
    fake_st = _FakeStreamlit()

    def _loader(from_date, to_date, schema_version=1):
        raise AuthenticationRequiredError()

    _install(monkeypatch, fake_st, _loader)

    app.main()

    assert fake_st.messages == [
        ("warning", "Please sign in to see your dashboard."),
    ]
    assert fake_st.metrics == []


def test_main_handles_empty_dashboard(monkeypatch):
    fake_st = _FakeStreamlit()
    _install(
        monkeypatch,
        fake_st,
        lambda from_date, to_date, schema_version=1: DashboardData.empty(),
    )

    app.main()

    infos = [text for kind, text in fake_st.messages if kind == "info"]
    assert "No monthly budget configured." in infos
    assert "Connect a bank account to see the forecast." in infos
    assert fake_st.tables == []


def test_prepare_forecast_chart_data_joins_series():
    data = app._prepare_forecast_chart_data(_dashboard().cash_flow_forecast)

    assert [row["type"] for row in data] == ["real", "projected", "projected"]
    assert data[-1]["label"] == "Mar 2024"
    assert data[0]["order"] < data[1]["order"]
