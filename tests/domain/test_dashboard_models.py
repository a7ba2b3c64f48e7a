"""Tests for the dashboard payload rendering."""

from datetime import datetime
from decimal import Decimal

from src.domain.models import (
    BankAccountData,
    CashFlowForecast,
    DashboardData,
    ForecastDataPoint,
    RecentTransaction,
)


def test_empty_dashboard_uses_configuration_defaults() -> None:
    payload = DashboardData.empty().to_dict()

    assert payload["totalRevenue"] == 0.0
    assert payload["taxRate"] == 22.0
    assert payload["monthlyBudget"] == 0.0
    assert payload["budgetAlertThreshold"] == 100.0
    assert payload["bankAccounts"] == []
    assert payload["historyData"] == []
    assert payload["cashFlowForecast"] == {
        "forecastData": [],
        "currentBalance": 0.0,
        "burnRate": 0.0,
        "hasEnoughData": False,
    }


def test_empty_dashboard_zeroes_one_history_point_per_label() -> None:
    payload = DashboardData.empty(["Jan", "Fév"]).to_dict()

    assert payload["historyData"] == [
        {"name": "Jan", "income": 0.0, "expense": 0.0, "net": 0.0},
        {"name": "Fév", "income": 0.0, "expense": 0.0, "net": 0.0},
    ]


def test_to_dict_renders_camel_case_and_floats() -> None:
    data = DashboardData(
        total_revenue=Decimal("1200.50"),
        bank_accounts=[
            BankAccountData(
                id="acc-1",
                bank_name="Qonto",
                mask="1234",
                current_balance=None,
                currency="EUR",
            )
        ],
        recent_transactions=[
            RecentTransaction(
                id="tx-1",
                date=datetime(2024, 3, 1, 9, 30),
                amount=Decimal("42"),
                description=None,
                type="EXPENSE",
                category="AUTRE",
                status="COMPLETED",
            )
        ],
        cash_flow_forecast=CashFlowForecast(
            forecast_data=[
                ForecastDataPoint(
                    date="Avr",
                    solde=Decimal("10.5"),
                    type="projected",
                    month=4,
                    year=2024,
                )
            ],
            current_balance=Decimal("20"),
            burn_rate=Decimal("9.5"),
            has_enough_data=True,
        ),
    )

    payload = data.to_dict()

    assert payload["totalRevenue"] == 1200.5
    assert payload["bankAccounts"][0] == {
        "id": "acc-1",
        "bankName": "Qonto",
        "mask": "1234",
        "currentBalance": None,
        "currency": "EUR",
    }
    assert payload["recentTransactions"][0]["date"] == "2024-03-01T09:30:00"
    assert payload["recentTransactions"][0]["amount"] == 42.0
    forecast = payload["cashFlowForecast"]
    assert forecast["forecastData"][0] == {
        "date": "Avr",
        "solde": 10.5,
        "type": "projected",
        "month": 4,
        "year": 2024,
    }
    assert forecast["hasEnoughData"] is True
