"""Authentication provider contract for archive API clients.

Token acquisition belongs to an external service; the archive clients only
depend on the ``get_access_token`` coroutine described here.
"""

import logging
from typing import Protocol, Sequence

from .models import AccessToken

logger = logging.getLogger(__name__)


class AuthenticationService(Protocol):
    """Anything able to issue a bearer token for a set of scopes."""

    async def get_access_token(self, scopes: Sequence[str]) -> AccessToken: ...


class StaticTokenProvider:
    """Authentication provider returning a pre-issued bearer token.

    Useful for command line usage and tests where the token was obtained
    out of band.
    """

    def __init__(self, token: str):
        if not token:
            raise ValueError("token cannot be empty")
        self._token = AccessToken(token=token)

    async def get_access_token(self, scopes: Sequence[str]) -> AccessToken:
        logger.debug(f"Issuing static token for scopes {list(scopes)}")
        return self._token
