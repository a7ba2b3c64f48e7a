"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import (
    DEFAULT_CHART_MAX_DAYS,
    DEFAULT_FORECAST_HORIZON_MONTHS,
    DEFAULT_FORECAST_LOOKBACK_MONTHS,
    DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
    DEFAULT_RECENT_TRANSACTIONS_LIMIT,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard composition.

    Attributes:
        user_id: Identity provider user id used outside a web session.
        chart_max_days: Maximum daily buckets in the revenue chart.
        recent_limit: Number of recent transactions shown.
        forecast_horizon_months: Projected months in the forecast.
        forecast_lookback_months: Observed months used for the burn rate.
        forecast_min_history_months: Non-zero months required for a
            reliable forecast.
        max_workers: Threads used to compute dashboard branches.
        timeout_seconds: Optional time budget for one composition.
    """

    user_id: str | None = None
    chart_max_days: int = DEFAULT_CHART_MAX_DAYS
    recent_limit: int = DEFAULT_RECENT_TRANSACTIONS_LIMIT
    forecast_horizon_months: int = DEFAULT_FORECAST_HORIZON_MONTHS
    forecast_lookback_months: int = DEFAULT_FORECAST_LOOKBACK_MONTHS
    forecast_min_history_months: int = DEFAULT_FORECAST_MIN_HISTORY_MONTHS
    max_workers: int = 4
    timeout_seconds: float | None = None

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            user_id=os.getenv("NUMERA_USER_ID") or None,
            chart_max_days=cls._read_int(
                "NUMERA_CHART_MAX_DAYS", DEFAULT_CHART_MAX_DAYS, logger
            ),
            recent_limit=cls._read_int(
                "NUMERA_RECENT_TRANSACTIONS_LIMIT",
                DEFAULT_RECENT_TRANSACTIONS_LIMIT,
                logger,
            ),
            forecast_horizon_months=cls._read_int(
                "NUMERA_FORECAST_HORIZON_MONTHS",
                DEFAULT_FORECAST_HORIZON_MONTHS,
                logger,
            ),
            forecast_lookback_months=cls._read_int(
                "NUMERA_FORECAST_LOOKBACK_MONTHS",
                DEFAULT_FORECAST_LOOKBACK_MONTHS,
                logger,
            ),
            forecast_min_history_months=cls._read_int(
                "NUMERA_FORECAST_MIN_HISTORY_MONTHS",
                DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
                logger,
            ),
            max_workers=cls._read_int(
                "NUMERA_DASHBOARD_MAX_WORKERS", 4, logger
            ),
            timeout_seconds=cls._read_timeout(logger),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a positive integer, falling back to the default.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}, using {default}")
            return default
        if value < 1:
            logger.warning(f"{name} must be positive, using {default}")
            return default
        return value

    @staticmethod
    def _read_timeout(logger) -> float | None:
        raw = os.getenv("NUMERA_DASHBOARD_TIMEOUT_SECONDS")
        if raw is None or not raw.strip():
            return None
        try:
            value = float(raw.strip())
        except ValueError:
            logger.warning(
                f"Invalid NUMERA_DASHBOARD_TIMEOUT_SECONDS={raw!r}, "
                "running without timeout"
            )
            return None
        return value if value > 0 else None


__all__ = ["DashboardSettings"]
