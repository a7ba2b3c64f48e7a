"""Application use cases package."""

from .get_cash_flow_forecast import GetCashFlowForecastUseCase
from .get_dashboard_data import GetDashboardDataUseCase

__all__ = [
    "GetCashFlowForecastUseCase",
    "GetDashboardDataUseCase",
]
