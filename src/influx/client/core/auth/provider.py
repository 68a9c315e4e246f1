# influx/client/core/auth/provider.py
from abc import ABC, abstractmethod

from influx.client.core.auth.models import AccessToken


class TokenProvider(ABC):
    @abstractmethod
    async def get_token(self) -> AccessToken:
        """
        Return a valid access token.
        Implementations must refresh or re-authenticate if needed.
        """
        ...


class StaticTokenProvider(TokenProvider):
    """Serves a fixed API token, as issued by the platform UI or CLI."""

    def __init__(self, token: str):
        if not token:
            raise ValueError("token must not be empty")
        self._token = AccessToken(token)

    async def get_token(self) -> AccessToken:
        return self._token
