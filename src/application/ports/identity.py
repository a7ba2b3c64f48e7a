"""Application port for the identity provider."""

from typing import Protocol

from src.domain.models import CurrentUser


class IdentityProviderPort(Protocol):
    """Port resolving the signed-in user and their companies."""

    def get_current_user(self) -> CurrentUser:
        """Return the signed-in user, companies ordered by creation.

        Raises:
            AuthenticationRequiredError: If nobody is signed in.
        """


__all__ = ["IdentityProviderPort"]
