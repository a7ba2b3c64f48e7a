"""Revenue classification based on company keywords."""

from collections.abc import Iterable

from src.domain.constants import INCOME
from src.domain.models import Transaction


def normalize_keywords(raw: str | Iterable[str] | None) -> list[str]:
    """Normalize revenue keywords.

    Args:
        raw: Comma-separated string as stored on the company, or an
            iterable of keywords.

    Returns:
        list[str]: Trimmed, upper-cased, non-empty keywords.
    """
    if not raw:
        return []
    tokens = raw.split(",") if isinstance(raw, str) else raw
    keywords = []
    for token in tokens:
        if token is None:
            continue
        cleaned = str(token).strip().upper()
        if cleaned:
            keywords.append(cleaned)
    return keywords


def is_revenue(
    transaction: Transaction,
    keywords: str | Iterable[str] | None,
) -> bool:
    """Return True when an income transaction counts as revenue.

    Without keywords every INCOME transaction is revenue. With keywords the
    description must contain one of them as a plain substring, case
    insensitive ("VIR" matches both "VIREMENT" and "AVIRON").

    Args:
        transaction: Transaction to classify.
        keywords: Revenue keywords, normalized or raw.

    Returns:
        bool: Whether the transaction is counted in revenue totals.
    """
    if transaction.type != INCOME:
        return False
    normalized = normalize_keywords(keywords)
    if not normalized:
        return True
    if not transaction.description:
        return False
    description = transaction.description.upper()
    return any(keyword in description for keyword in normalized)


__all__ = ["normalize_keywords", "is_revenue"]
