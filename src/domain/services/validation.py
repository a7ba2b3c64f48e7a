"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from src.domain.constants import TRANSACTION_TYPES
from src.domain.models import Transaction


def validate_transactions(
    transactions: Iterable[Transaction],
    logger: Logger,
) -> None:
    """Warn when transactions violate ledger conventions.

    Amounts are magnitudes and the direction lives in ``type``; a negative
    amount or an unknown type is reported but not corrected.

    Args:
        transactions: Transactions read from the ledger.
        logger: Logger used for warnings.
    """
    for tx in transactions:
        if tx.amount < 0:
            logger.warning(
                f"Transaction {tx.id} has a negative amount: {tx.amount}"
            )
        if tx.type not in TRANSACTION_TYPES:
            logger.warning(
                f"Transaction {tx.id} has an unknown type: {tx.type}"
            )


__all__ = ["validate_transactions"]
