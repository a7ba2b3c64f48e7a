"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings


ENV_VARS = [
    "NUMERA_USER_ID",
    "NUMERA_CHART_MAX_DAYS",
    "NUMERA_RECENT_TRANSACTIONS_LIMIT",
    "NUMERA_FORECAST_HORIZON_MONTHS",
    "NUMERA_FORECAST_LOOKBACK_MONTHS",
    "NUMERA_FORECAST_MIN_HISTORY_MONTHS",
    "NUMERA_DASHBOARD_MAX_WORKERS",
    "NUMERA_DASHBOARD_TIMEOUT_SECONDS",
]


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_defaults(logger) -> None:
    """Unset variables should keep the documented defaults."""
    settings = DashboardSettings.from_env()

    assert settings == DashboardSettings()
    assert settings.chart_max_days == 90
    assert settings.forecast_min_history_months == 3
    assert settings.timeout_seconds is None
    logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, logger) -> None:
    monkeypatch.setenv("NUMERA_USER_ID", "user_2abc")
    monkeypatch.setenv("NUMERA_FORECAST_MIN_HISTORY_MONTHS", "2")
    monkeypatch.setenv("NUMERA_DASHBOARD_MAX_WORKERS", "1")
    monkeypatch.setenv("NUMERA_DASHBOARD_TIMEOUT_SECONDS", "2.5")

    settings = DashboardSettings.from_env()

    assert settings.user_id == "user_2abc"
    assert settings.forecast_min_history_months == 2
    assert settings.max_workers == 1
    assert settings.timeout_seconds == 2.5


def test_from_env_invalid_values_fall_back_with_warning(
    monkeypatch,
    logger,
) -> None:
    monkeypatch.setenv("NUMERA_CHART_MAX_DAYS", "lots")
    monkeypatch.setenv("NUMERA_FORECAST_HORIZON_MONTHS", "0")
    monkeypatch.setenv("NUMERA_DASHBOARD_TIMEOUT_SECONDS", "soon")

    settings = DashboardSettings.from_env()

    assert settings.chart_max_days == 90
    assert settings.forecast_horizon_months == 6
    assert settings.timeout_seconds is None
    assert logger.warning.call_count == 3
