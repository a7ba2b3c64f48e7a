"""Tests for the dashboard_data_cli adapter."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import dashboard_data_cli
from src.domain.errors import AuthenticationRequiredError
from src.domain.models import DashboardData


def _patch(monkeypatch, use_case, logger=None):
    monkeypatch.setattr(dashboard_data_cli.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(
        dashboard_data_cli,
        "get_app_logger",
        lambda: logger or MagicMock(),
    )
    monkeypatch.setattr(
        dashboard_data_cli,
        "build_get_dashboard_data_use_case",
        lambda: use_case,
    )


def test_main_prints_payload_for_requested_period(monkeypatch, capsys):
    """The CLI forwards DASHBOARD_FROM/TO and prints camelCase JSON."""
    use_case = MagicMock()
    use_case.execute.return_value = DashboardData(
        total_revenue=Decimal("1200.5"),
    )
    _patch(monkeypatch, use_case)
    monkeypatch.setenv("DASHBOARD_FROM", "2024-01-01")
    monkeypatch.setenv("DASHBOARD_TO", "2024-01-31")

    exit_code = dashboard_data_cli.main()

    assert exit_code == 0
    use_case.execute.assert_called_once_with(
        from_date="2024-01-01",
        to_date="2024-01-31",
    )
    payload = json.loads(capsys.readouterr().out)
    assert payload["totalRevenue"] == 1200.5
    assert payload["cashFlowForecast"]["hasEnoughData"] is False


def test_main_reports_missing_user(monkeypatch, capsys):
    use_case = MagicMock()
    use_case.execute.side_effect = AuthenticationRequiredError("no user")
    logger = MagicMock()
    _patch(monkeypatch, use_case, logger)
    monkeypatch.delenv("DASHBOARD_FROM", raising=False)
    monkeypatch.delenv("DASHBOARD_TO", raising=False)

    exit_code = dashboard_data_cli.main()

    assert exit_code == 1
    assert "NUMERA_USER_ID" in capsys.readouterr().out
    logger.error.assert_called_once()
