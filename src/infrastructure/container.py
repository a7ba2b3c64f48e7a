"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import IdentityProviderPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_cash_flow_forecast import (
    GetCashFlowForecastUseCase,
)
from src.application.use_cases.get_dashboard_data import (
    GetDashboardDataUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.identity import SqlAlchemyIdentityProvider
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_identity_provider(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> IdentityProviderPort:
    """Return the identity provider for a session user id.

    Args:
        db_port: Optional database adapter override.
        user_id: Identity provider user id; defaults to NUMERA_USER_ID.
    """
    resolved_db = db_port or build_database_adapter()
    resolved_user = user_id or DashboardSettings.from_env().user_id
    return SqlAlchemyIdentityProvider(resolved_db, resolved_user)


def build_get_dashboard_data_use_case(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
    settings: DashboardSettings | None = None,
) -> GetDashboardDataUseCase:
    """Return the dashboard composer wired to SQLAlchemy adapters."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or DashboardSettings.from_env()
    logger = get_app_logger()
    ledger_repository = build_ledger_repository(resolved_db)
    forecast_use_case = GetCashFlowForecastUseCase(
        ledger_repository=ledger_repository,
        logger=logger,
        horizon_months=resolved_settings.forecast_horizon_months,
        lookback_months=resolved_settings.forecast_lookback_months,
        min_history_months=resolved_settings.forecast_min_history_months,
    )
    return GetDashboardDataUseCase(
        identity_provider=build_identity_provider(
            resolved_db,
            user_id or resolved_settings.user_id,
        ),
        ledger_repository=ledger_repository,
        forecast_use_case=forecast_use_case,
        logger=logger,
        chart_max_days=resolved_settings.chart_max_days,
        recent_limit=resolved_settings.recent_limit,
        max_workers=resolved_settings.max_workers,
        timeout_seconds=resolved_settings.timeout_seconds,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_identity_provider",
    "build_get_dashboard_data_use_case",
]
