"""Use case to project the company cash balance."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.failures import log_swallowed_failure
from src.domain.constants import (
    DEFAULT_FORECAST_HORIZON_MONTHS,
    DEFAULT_FORECAST_LOOKBACK_MONTHS,
    DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
    INVOICE_STATUS_SENT,
)
from src.domain.models import BankAccount, CashFlowForecast, TenantContext
from src.domain.services.aggregation import aggregate_period, group_by_month
from src.domain.services.forecast import forecast
from src.domain.services.invoices import expected_invoice_inflows
from src.domain.services.periods import trailing_month_windows
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetCashFlowForecastUseCase:
    """Build the 6-month cash-flow forecast from ledger and bank data."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        horizon_months: int = DEFAULT_FORECAST_HORIZON_MONTHS,
        lookback_months: int = DEFAULT_FORECAST_LOOKBACK_MONTHS,
        min_history_months: int = DEFAULT_FORECAST_MIN_HISTORY_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger reads.
            logger: Optional logger compatible with logging.Logger-like API.
            horizon_months: Number of projected months.
            lookback_months: Observed months used for the burn rate.
            min_history_months: Non-zero months required for a reliable
                projection.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._horizon_months = horizon_months
        self._lookback_months = lookback_months
        self._min_history_months = min_history_months

    def execute(
        self,
        context: TenantContext,
        today: date,
    ) -> CashFlowForecast:
        """Return the forecast, or an empty one when it cannot be built.

        Args:
            context: Tenant whose balance is projected.
            today: Reference day of the projection.

        Returns:
            CashFlowForecast: Projection, never raises.
        """
        try:
            return self._build(context, today)
        except Exception as exc:
            log_swallowed_failure(self._logger, "Cash-flow forecast", exc)
            return CashFlowForecast.empty()

    def _build(self, context: TenantContext, today: date) -> CashFlowForecast:
        accounts = self._ledger_repository.fetch_bank_accounts(
            context.user_id
        )
        current_balance = self.total_balance(accounts)
        if current_balance is None:
            self._logger.info(
                f"No bank balance for user={context.user_id}, "
                "skipping forecast"
            )
            return CashFlowForecast.empty()

        windows = trailing_month_windows(today, self._lookback_months)
        transactions = self._ledger_repository.fetch_transactions(
            context.company_id,
            windows[0].start,
            windows[-1].end,
        )
        monthly_net = [
            aggregate_period(month_transactions, None).net_income
            for month_transactions in group_by_month(transactions, windows)
        ]
        invoices = self._ledger_repository.fetch_invoices(
            context.company_id,
            status=INVOICE_STATUS_SENT,
        )

        result = forecast(
            current_balance,
            monthly_net,
            self._horizon_months,
            as_of=today,
            min_history_months=self._min_history_months,
            expected_inflows=expected_invoice_inflows(invoices),
        )
        self._logger.info(
            f"Forecast computed: balance={result.current_balance}, "
            f"burn_rate={result.burn_rate}, "
            f"points={len(result.forecast_data)}, "
            f"enough_data={result.has_enough_data}"
        )
        return result

    @staticmethod
    def total_balance(accounts: Sequence[BankAccount]) -> Decimal | None:
        """Sum the known balances of connected accounts.

        Returns:
            Decimal | None: Total balance, or None when no account reports
            a balance.
        """
        balances = [
            coerce_decimal(account.current_balance)
            for account in accounts
            if account.current_balance is not None
        ]
        if not balances:
            return None
        return sum(balances, Decimal("0"))


__all__ = ["GetCashFlowForecastUseCase"]
