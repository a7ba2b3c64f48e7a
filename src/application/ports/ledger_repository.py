"""Application port for ledger data access."""

from datetime import datetime
from typing import Protocol

from src.domain.models import BankAccount, Invoice, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to the ledger."""

    def fetch_transactions(
        self,
        company_id: str,
        start: datetime | None,
        end: datetime | None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        """Return company transactions dated within [start, end]."""

    def fetch_recent_transactions(
        self,
        company_id: str,
        limit: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Transaction]:
        """Return the latest transactions, most recent first."""

    def fetch_bank_accounts(self, user_id: str) -> list[BankAccount]:
        """Return the bank accounts connected by a user."""

    def fetch_invoices(
        self,
        company_id: str,
        status: str | None = None,
    ) -> list[Invoice]:
        """Return company invoices with their rows."""


__all__ = ["LedgerRepositoryPort"]
