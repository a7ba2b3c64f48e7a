"""Domain-level exceptions."""


class NumeraError(Exception):
    """Base class for dashboard errors."""


class AuthenticationRequiredError(NumeraError):
    """Raised when no signed-in user can be resolved.

    Presentation adapters translate it into a sign-in redirect.
    """


class SchemaMismatchError(NumeraError):
    """Raised when the ledger schema lacks columns the dashboard reads."""


__all__ = [
    "NumeraError",
    "AuthenticationRequiredError",
    "SchemaMismatchError",
]
