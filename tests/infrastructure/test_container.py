"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard_data import (
    GetDashboardDataUseCase,
)
from src.infrastructure import container
from src.infrastructure.identity import SqlAlchemyIdentityProvider
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import DashboardSettings


def test_build_ledger_repository_uses_given_port() -> None:
    db_port = MagicMock()

    repository = container.build_ledger_repository(db_port=db_port)

    assert isinstance(repository, SqlAlchemyLedgerRepository)
    assert repository._db_port is db_port


def test_build_identity_provider_prefers_explicit_user() -> None:
    provider = container.build_identity_provider(
        db_port=MagicMock(),
        user_id="user_explicit",
    )

    assert isinstance(provider, SqlAlchemyIdentityProvider)
    assert provider._external_user_id == "user_explicit"


def test_build_dashboard_use_case_applies_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = DashboardSettings(
        user_id="user_settings",
        recent_limit=3,
        forecast_min_history_months=2,
        max_workers=1,
        timeout_seconds=4.0,
    )

    use_case = container.build_get_dashboard_data_use_case(
        db_port=MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, GetDashboardDataUseCase)
    assert use_case._recent_limit == 3
    assert use_case._max_workers == 1
    assert use_case._timeout_seconds == 4.0
    assert use_case._forecast_use_case._min_history_months == 2
    assert (
        use_case._identity_provider._external_user_id == "user_settings"
    )
