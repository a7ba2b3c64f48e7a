"""Classification of failures swallowed by read-only use cases."""

from src.domain.errors import SchemaMismatchError


SCHEMA_MISMATCH_MARKERS = (
    "taxRate",
    "revenueKeywords",
    "monthlyBudget",
    "budgetAlertThreshold",
    "currentBalance",
    "Unknown argument",
    "Unknown field",
    "UndefinedColumn",
    "does not exist",
)


def is_schema_mismatch(exc: BaseException) -> bool:
    """Return True when an error comes from a ledger schema not yet migrated.

    Args:
        exc: Exception raised while reading the ledger.

    Returns:
        bool: Whether the error matches a known missing-column failure.
    """
    if isinstance(exc, SchemaMismatchError):
        return True
    message = str(exc)
    return any(marker in message for marker in SCHEMA_MISMATCH_MARKERS)


def log_swallowed_failure(logger, scope: str, exc: BaseException) -> None:
    """Log an error that is replaced by a safe default.

    Args:
        logger: Logger compatible with logging.Logger-like API.
        scope: Name of the step that failed.
        exc: Exception being swallowed.
    """
    if is_schema_mismatch(exc):
        logger.warning(
            f"{scope}: ledger schema is missing dashboard columns, "
            f"run the pending migrations ({exc})"
        )
        return
    logger.error(f"{scope} failed, using defaults: {exc!r}")


__all__ = ["is_schema_mismatch", "log_swallowed_failure"]
