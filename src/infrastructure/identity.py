"""Identity adapter resolving the signed-in user from the ledger.

Sessions are handled by the external identity provider; this adapter only
receives the provider's user id (``clerkUserId``) and loads the matching
user and companies.
"""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import IdentityProviderPort
from src.domain.constants import (
    DEFAULT_BUDGET_ALERT_THRESHOLD,
    DEFAULT_MONTHLY_BUDGET,
)
from src.domain.errors import AuthenticationRequiredError
from src.domain.models import Company, CurrentUser
from src.utils.decimal_utils import coerce_decimal


SELECT_USER_SQL = text(
    """
    SELECT id
    FROM users
    WHERE "clerkUserId" = :external_id
    LIMIT 1
    """
)

SELECT_COMPANIES_SQL = text(
    """
    SELECT id,
           name,
           "taxRate" AS tax_rate,
           "revenueKeywords" AS revenue_keywords,
           "monthlyBudget" AS monthly_budget,
           "budgetAlertThreshold" AS budget_alert_threshold
    FROM companies
    WHERE "userId" = :user_id
    ORDER BY "createdAt" ASC
    """
)


class SqlAlchemyIdentityProvider(IdentityProviderPort):
    """Resolve the current user from an external provider user id."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        external_user_id: str | None,
    ) -> None:
        """Initialize the provider.

        Args:
            db_port: Port providing access to the ledger engine.
            external_user_id: Identity provider user id of the session.
        """
        self._db_port = db_port
        self._external_user_id = external_user_id

    def get_current_user(self) -> CurrentUser:
        if not self._external_user_id:
            raise AuthenticationRequiredError("No signed-in user.")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            user_row = conn.execute(
                SELECT_USER_SQL,
                {"external_id": self._external_user_id},
            ).first()
            if user_row is None:
                raise AuthenticationRequiredError(
                    f"Unknown user: {self._external_user_id}"
                )
            company_rows = conn.execute(
                SELECT_COMPANIES_SQL,
                {"user_id": user_row.id},
            ).all()
        return CurrentUser(
            id=user_row.id,
            companies=[self._to_company(row) for row in company_rows],
        )

    @staticmethod
    def _to_company(row) -> Company:
        return Company(
            id=row.id,
            name=row.name or "",
            tax_rate=(
                None if row.tax_rate is None else coerce_decimal(row.tax_rate)
            ),
            revenue_keywords=row.revenue_keywords,
            monthly_budget=(
                DEFAULT_MONTHLY_BUDGET
                if row.monthly_budget is None
                else coerce_decimal(row.monthly_budget)
            ),
            budget_alert_threshold=(
                DEFAULT_BUDGET_ALERT_THRESHOLD
                if row.budget_alert_threshold is None
                else coerce_decimal(row.budget_alert_threshold)
            ),
        )


__all__ = ["SqlAlchemyIdentityProvider"]
