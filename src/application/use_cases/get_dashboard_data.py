"""Use case composing the dashboard payload.

The composition is read-only and never raises to its caller, except for
``AuthenticationRequiredError`` which presentation layers turn into a
sign-in redirect. Each branch (period totals, recent transactions, annual
revenue, history, bank accounts, forecast) is independent: a failing or
slow branch is replaced by its default so the rest of the dashboard still
renders.
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
import time
from typing import Any

from src.application.ports.identity import IdentityProviderPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.failures import log_swallowed_failure
from src.application.use_cases.get_cash_flow_forecast import (
    GetCashFlowForecastUseCase,
)
from src.domain.constants import (
    DEFAULT_CHART_MAX_DAYS,
    DEFAULT_RECENT_TRANSACTIONS_LIMIT,
    INCOME,
)
from src.domain.errors import AuthenticationRequiredError
from src.domain.models import (
    BankAccount,
    BankAccountData,
    CashFlowForecast,
    ChartDataPoint,
    DashboardData,
    PeriodTotals,
    RecentTransaction,
    ReportingPeriod,
    TenantContext,
    Transaction,
)
from src.domain.services.aggregation import (
    aggregate_period,
    annual_revenue,
    build_daily_series,
    empty_history,
    group_by_month,
    trailing_twelve_months,
)
from src.domain.services.periods import (
    resolve_reporting_period,
    trailing_month_windows,
    year_start,
)
from src.domain.services.revenue import normalize_keywords
from src.domain.services.tax_budget import (
    compute_budget_status,
    compute_tax_provision,
)
from src.domain.services.validation import validate_transactions
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class _Branch:
    name: str
    run: Callable[[], Any]
    default: Callable[[], Any]


class GetDashboardDataUseCase:
    """Compose the dashboard data for the signed-in user's first company.

    Branches that exceed the timeout are replaced by their defaults, but
    the executor cannot stop them: each keeps running on its worker thread,
    holding its pooled database connection, until its query returns.
    """

    def __init__(
        self,
        identity_provider: IdentityProviderPort,
        ledger_repository: LedgerRepositoryPort,
        forecast_use_case: GetCashFlowForecastUseCase | None = None,
        logger=None,
        chart_max_days: int = DEFAULT_CHART_MAX_DAYS,
        recent_limit: int = DEFAULT_RECENT_TRANSACTIONS_LIMIT,
        max_workers: int = 4,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            identity_provider: Port resolving the signed-in user.
            ledger_repository: Port providing ledger reads.
            forecast_use_case: Optional forecast use case override.
            logger: Optional logger compatible with logging.Logger-like API.
            chart_max_days: Maximum number of daily chart buckets.
            recent_limit: Number of recent transactions displayed.
            max_workers: Threads used to run branches; 1 runs them inline.
            timeout_seconds: Optional budget for the whole composition.
        """
        self._identity_provider = identity_provider
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._forecast_use_case = forecast_use_case or (
            GetCashFlowForecastUseCase(
                ledger_repository=ledger_repository,
                logger=self._logger,
            )
        )
        self._chart_max_days = chart_max_days
        self._recent_limit = recent_limit
        self._max_workers = max(1, max_workers)
        self._timeout_seconds = timeout_seconds

    def execute(
        self,
        from_date=None,
        to_date=None,
        now: datetime | None = None,
    ) -> DashboardData:
        """Return the dashboard data for a reporting period.

        Args:
            from_date: Optional period start (``YYYY-MM-DD`` or date).
            to_date: Optional period end (``YYYY-MM-DD`` or date).
            now: Optional reference instant, defaults to the current time.

        Returns:
            DashboardData: Populated data, or zeroed data on failure.

        Raises:
            AuthenticationRequiredError: If nobody is signed in.
        """
        resolved_now = now or datetime.now()
        try:
            user = self._identity_provider.get_current_user()
        except AuthenticationRequiredError:
            raise
        except Exception as exc:
            log_swallowed_failure(self._logger, "Identity resolution", exc)
            return self._empty_dashboard(resolved_now)

        if not user.companies:
            self._logger.warning(
                f"User {user.id} has no company, returning empty dashboard"
            )
            return self._empty_dashboard(resolved_now)

        context = TenantContext(user_id=user.id, company=user.companies[0])
        try:
            return self._compose(context, from_date, to_date, resolved_now)
        except AuthenticationRequiredError:
            raise
        except Exception as exc:
            log_swallowed_failure(self._logger, "Dashboard composition", exc)
            return self._empty_dashboard(resolved_now)

    def _compose(
        self,
        context: TenantContext,
        from_date,
        to_date,
        now: datetime,
    ) -> DashboardData:
        today = now.date()
        company = context.company
        period = resolve_reporting_period(
            from_date,
            to_date,
            today,
            logger=self._logger,
        )
        keywords = normalize_keywords(company.revenue_keywords)
        windows = trailing_month_windows(today)
        month_labels = [window.label for window in windows]

        branches = [
            _Branch(
                "period",
                lambda: self._period_branch(context, period, keywords),
                lambda: (PeriodTotals(), self._empty_chart(period)),
            ),
            _Branch(
                "recent_transactions",
                lambda: self._recent_branch(context, period),
                list,
            ),
            _Branch(
                "annual_revenue",
                lambda: self._annual_branch(context, keywords, now),
                lambda: Decimal("0"),
            ),
            _Branch(
                "history",
                lambda: self._history_branch(context, windows, keywords),
                lambda: empty_history(month_labels),
            ),
            _Branch(
                "bank_accounts",
                lambda: self._bank_accounts_branch(context),
                list,
            ),
            _Branch(
                "forecast",
                lambda: self._forecast_use_case.execute(context, today),
                CashFlowForecast.empty,
            ),
        ]
        results = self._run_branches(branches)

        totals, chart_data = results["period"]
        tax = compute_tax_provision(totals.total_revenue, company.tax_rate)
        budget = compute_budget_status(
            totals.total_expenses,
            company.monthly_budget,
            company.budget_alert_threshold,
        )
        self._logger.info(
            f"Dashboard composed for company={company.id}: "
            f"period={period.start.date()}..{period.end.date()}, "
            f"revenue={totals.total_revenue}, "
            f"expenses={totals.total_expenses}"
        )
        return DashboardData(
            total_revenue=totals.total_revenue,
            total_expenses=totals.total_expenses,
            net_income=totals.net_income,
            annual_revenue=results["annual_revenue"],
            tax_amount=tax.tax_amount,
            net_available=tax.net_available,
            tax_rate=tax.tax_rate,
            monthly_budget=budget.monthly_budget,
            budget_alert_threshold=budget.budget_alert_threshold,
            budget_used_percent=budget.budget_used_percent,
            budget_remaining=budget.budget_remaining,
            bank_accounts=results["bank_accounts"],
            recent_transactions=results["recent_transactions"],
            chart_data=chart_data,
            history_data=results["history"],
            cash_flow_forecast=results["forecast"],
        )

    def _run_branches(self, branches: list[_Branch]) -> dict[str, Any]:
        if self._max_workers == 1:
            return {
                branch.name: self._run_inline(branch) for branch in branches
            }

        results: dict[str, Any] = {}
        deadline = (
            time.monotonic() + self._timeout_seconds
            if self._timeout_seconds is not None
            else None
        )
        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(branches)),
            thread_name_prefix="dashboard",
        )
        try:
            futures = {
                branch.name: executor.submit(branch.run) for branch in branches
            }
            for branch in branches:
                remaining = (
                    max(0.0, deadline - time.monotonic())
                    if deadline is not None
                    else None
                )
                try:
                    results[branch.name] = futures[branch.name].result(
                        timeout=remaining
                    )
                except FutureTimeoutError:
                    self._logger.error(
                        f"Dashboard branch '{branch.name}' timed out, "
                        "using defaults"
                    )
                    results[branch.name] = branch.default()
                except AuthenticationRequiredError:
                    raise
                except Exception as exc:
                    log_swallowed_failure(
                        self._logger,
                        f"Dashboard branch '{branch.name}'",
                        exc,
                    )
                    results[branch.name] = branch.default()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return results

    def _run_inline(self, branch: _Branch) -> Any:
        try:
            return branch.run()
        except AuthenticationRequiredError:
            raise
        except Exception as exc:
            log_swallowed_failure(
                self._logger,
                f"Dashboard branch '{branch.name}'",
                exc,
            )
            return branch.default()

    def _period_branch(
        self,
        context: TenantContext,
        period: ReportingPeriod,
        keywords: list[str],
    ) -> tuple[PeriodTotals, list[ChartDataPoint]]:
        transactions = self._ledger_repository.fetch_transactions(
            context.company_id,
            period.start,
            period.end,
        )
        validate_transactions(transactions, self._logger)
        totals = aggregate_period(transactions, keywords)
        chart_data = build_daily_series(
            transactions,
            period.start,
            period.end,
            max_days=self._chart_max_days,
        )
        return totals, chart_data

    def _empty_chart(self, period: ReportingPeriod) -> list[ChartDataPoint]:
        return build_daily_series(
            [],
            period.start,
            period.end,
            max_days=self._chart_max_days,
        )

    def _recent_branch(
        self,
        context: TenantContext,
        period: ReportingPeriod,
    ) -> list[RecentTransaction]:
        transactions = self._ledger_repository.fetch_recent_transactions(
            context.company_id,
            self._recent_limit,
            start=period.start,
            end=period.end,
        )
        ordered = sorted(transactions, key=lambda tx: tx.date, reverse=True)
        return [
            self._to_recent_transaction(tx)
            for tx in ordered[: self._recent_limit]
        ]

    def _annual_branch(
        self,
        context: TenantContext,
        keywords: list[str],
        now: datetime,
    ) -> Decimal:
        start = year_start(now.date())
        transactions = self._ledger_repository.fetch_transactions(
            context.company_id,
            start,
            now,
            transaction_type=INCOME,
        )
        return annual_revenue(transactions, keywords, start, now)

    def _history_branch(self, context: TenantContext, windows, keywords):
        transactions = self._ledger_repository.fetch_transactions(
            context.company_id,
            windows[0].start,
            windows[-1].end,
        )
        return trailing_twelve_months(
            group_by_month(transactions, windows),
            [window.label for window in windows],
            keywords,
        )

    def _bank_accounts_branch(
        self,
        context: TenantContext,
    ) -> list[BankAccountData]:
        accounts = self._ledger_repository.fetch_bank_accounts(
            context.user_id
        )
        return [self._to_bank_account_data(account) for account in accounts]

    @staticmethod
    def _empty_dashboard(now: datetime) -> DashboardData:
        windows = trailing_month_windows(now.date())
        return DashboardData.empty([window.label for window in windows])

    @staticmethod
    def _to_recent_transaction(tx: Transaction) -> RecentTransaction:
        return RecentTransaction(
            id=tx.id,
            date=tx.date,
            amount=tx.amount,
            description=tx.description,
            type=tx.type,
            category=tx.category,
            status=tx.status,
        )

    @staticmethod
    def _to_bank_account_data(account: BankAccount) -> BankAccountData:
        return BankAccountData(
            id=account.id,
            bank_name=account.bank_name,
            mask=account.mask,
            current_balance=account.current_balance,
            currency=account.currency,
        )


__all__ = ["GetDashboardDataUseCase"]
