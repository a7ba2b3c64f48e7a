"""Tests for transaction validation warnings."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.constants import INCOME
from src.domain.models import Transaction
from src.domain.services.validation import validate_transactions


def test_validate_transactions_warns_on_anomalies() -> None:
    logger = MagicMock()
    transactions = [
        Transaction(
            id="ok",
            company_id="co-1",
            date=datetime(2024, 1, 1),
            amount=Decimal("10"),
            type=INCOME,
        ),
        Transaction(
            id="negative",
            company_id="co-1",
            date=datetime(2024, 1, 1),
            amount=Decimal("-10"),
            type=INCOME,
        ),
        Transaction(
            id="unknown",
            company_id="co-1",
            date=datetime(2024, 1, 1),
            amount=Decimal("10"),
            type="TRANSFER",
        ),
    ]

    validate_transactions(transactions, logger)

    messages = [call.args[0] for call in logger.warning.call_args_list]
    assert len(messages) == 2
    assert "negative" in messages[0]
    assert "TRANSFER" in messages[1]
