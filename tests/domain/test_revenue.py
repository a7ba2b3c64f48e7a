"""Tests for revenue classification."""

from datetime import datetime
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import Transaction
from src.domain.services.revenue import is_revenue, normalize_keywords


def _tx(tx_type: str, description: str | None) -> Transaction:
    return Transaction(
        id="tx-1",
        company_id="co-1",
        date=datetime(2024, 3, 10),
        amount=Decimal("100"),
        type=tx_type,
        description=description,
    )


def test_normalize_keywords_trims_and_uppercases() -> None:
    """Comma-separated keywords should be trimmed and upper-cased."""
    assert normalize_keywords(" vir, stripe ,, ") == ["VIR", "STRIPE"]


def test_normalize_keywords_accepts_iterables_and_empty_values() -> None:
    assert normalize_keywords(["a", " ", None, "b "]) == ["A", "B"]
    assert normalize_keywords(None) == []
    assert normalize_keywords("") == []


def test_income_without_keywords_is_revenue() -> None:
    """Every income counts when no keyword is configured."""
    assert is_revenue(_tx(INCOME, None), None) is True
    assert is_revenue(_tx(INCOME, "anything"), "") is True


def test_expense_is_never_revenue() -> None:
    assert is_revenue(_tx(EXPENSE, "VIREMENT CLIENT"), "VIR") is False


def test_keywords_match_as_case_insensitive_substrings() -> None:
    """'VIR' matches VIREMENT and AVIRON alike."""
    assert is_revenue(_tx(INCOME, "Virement client"), "vir") is True
    assert is_revenue(_tx(INCOME, "aviron club"), "VIR") is True
    assert is_revenue(_tx(INCOME, "Stripe payout"), "VIR") is False


def test_missing_description_is_rejected_when_keywords_set() -> None:
    assert is_revenue(_tx(INCOME, None), "VIR") is False
    assert is_revenue(_tx(INCOME, ""), "VIR") is False
