from influx.client.core.auth.models import AccessToken
from influx.client.core.auth.provider import StaticTokenProvider, TokenProvider

__all__ = ["AccessToken", "StaticTokenProvider", "TokenProvider"]
