"""Application ports package."""

from .database import DatabaseEnginePort
from .identity import IdentityProviderPort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "IdentityProviderPort",
    "LedgerRepositoryPort",
]
