"""SQLAlchemy-backed repository for ledger reads.

Tables and quoted camelCase columns follow the schema created by the web
application's ORM migrations (``transactions``, ``bank_accounts``,
``invoices``, ``invoice_rows``).
"""

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import ProgrammingError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import SchemaMismatchError
from src.domain.models import BankAccount, Invoice, InvoiceRow, Transaction
from src.utils.decimal_utils import coerce_decimal


TRANSACTION_COLUMNS = """
    SELECT id,
           "companyId" AS company_id,
           date,
           amount,
           description,
           type::text AS type,
           category::text AS category,
           status::text AS status
    FROM transactions
    WHERE "companyId" = :company_id
"""


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for dashboard ledger queries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        company_id: str,
        start: datetime | None,
        end: datetime | None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        sql = TRANSACTION_COLUMNS + self._date_filters(start, end)
        params = self._build_params(company_id, start, end)
        if transaction_type:
            sql += " AND type::text = :transaction_type"
            params["transaction_type"] = transaction_type
        sql += " ORDER BY date ASC"
        rows = self._fetch_all(text(sql), params)
        return [self._to_transaction(row) for row in rows]

    def fetch_recent_transactions(
        self,
        company_id: str,
        limit: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Transaction]:
        sql = (
            TRANSACTION_COLUMNS
            + self._date_filters(start, end)
            + " ORDER BY date DESC LIMIT :limit"
        )
        params = self._build_params(company_id, start, end)
        params["limit"] = limit
        rows = self._fetch_all(text(sql), params)
        return [self._to_transaction(row) for row in rows]

    def fetch_bank_accounts(self, user_id: str) -> list[BankAccount]:
        query = text(
            """
            SELECT id,
                   "userId" AS user_id,
                   "bankName" AS bank_name,
                   mask,
                   "currentBalance" AS current_balance,
                   currency
            FROM bank_accounts
            WHERE "userId" = :user_id
            ORDER BY "createdAt" DESC
            """
        )
        rows = self._fetch_all(query, {"user_id": user_id})
        return [
            BankAccount(
                id=row.id,
                user_id=row.user_id,
                bank_name=row.bank_name,
                mask=row.mask,
                current_balance=(
                    None
                    if row.current_balance is None
                    else coerce_decimal(row.current_balance)
                ),
                currency=row.currency or DEFAULT_CURRENCY,
            )
            for row in rows
        ]

    def fetch_invoices(
        self,
        company_id: str,
        status: str | None = None,
    ) -> list[Invoice]:
        sql = """
        SELECT i.id AS invoice_id,
               i.number AS number,
               i.status::text AS status,
               i."dueDate" AS due_date,
               r.id AS row_id,
               r.quantity AS quantity,
               r."unitPrice" AS unit_price,
               r."vatRate" AS vat_rate
        FROM invoices i
        LEFT JOIN invoice_rows r ON r."invoiceId" = i.id
        WHERE i."companyId" = :company_id
        """
        params: dict[str, object] = {"company_id": company_id}
        if status:
            sql += " AND i.status::text = :status"
            params["status"] = status
        sql += " ORDER BY i.\"dueDate\", i.id"
        rows = self._fetch_all(text(sql), params)

        headers: dict[str, tuple[str, str, datetime | None]] = {}
        invoice_rows: dict[str, list[InvoiceRow]] = {}
        for row in rows:
            if row.invoice_id not in headers:
                headers[row.invoice_id] = (
                    row.number,
                    row.status,
                    row.due_date,
                )
                invoice_rows[row.invoice_id] = []
            if row.row_id is None:
                continue
            invoice_rows[row.invoice_id].append(
                InvoiceRow(
                    quantity=coerce_decimal(row.quantity),
                    unit_price=coerce_decimal(row.unit_price),
                    vat_rate=coerce_decimal(row.vat_rate),
                )
            )
        return [
            Invoice(
                id=invoice_id,
                number=number,
                status=invoice_status,
                due_date=due_date,
                rows=invoice_rows[invoice_id],
            )
            for invoice_id, (number, invoice_status, due_date)
            in headers.items()
        ]

    def _fetch_all(self, query, params: dict) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except ProgrammingError as exc:
            if "does not exist" in str(exc):
                raise SchemaMismatchError(str(exc)) from exc
            raise

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=row.id,
            company_id=row.company_id,
            date=row.date,
            amount=coerce_decimal(row.amount),
            type=row.type,
            description=row.description,
            category=row.category,
            status=row.status,
        )

    @staticmethod
    def _date_filters(
        start: datetime | None,
        end: datetime | None,
    ) -> str:
        sql = ""
        if start:
            sql += " AND date >= :start"
        if end:
            sql += " AND date <= :end"
        return sql

    @staticmethod
    def _build_params(
        company_id: str,
        start: datetime | None,
        end: datetime | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {"company_id": company_id}
        if start:
            params["start"] = start
        if end:
            params["end"] = end
        return params


__all__ = ["SqlAlchemyLedgerRepository"]
