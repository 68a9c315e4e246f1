# influx/client/core/auth/models.py
from dataclasses import dataclass
import time


@dataclass
class AccessToken:
    access_token: str
    expires_at: float | None = None

    def is_valid(self, leeway: int = 30) -> bool:
        """
        Returns True if token is still valid.
        Tokens without ``expires_at`` never expire.
        """
        if self.expires_at is None:
            return True
        return time.time() < (self.expires_at - leeway)
