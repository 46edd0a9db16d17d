"""JWT implementation of TokenProvider, backed by python-jose."""

import logging
from datetime import datetime, timezone

from jose import JWTError, jwt

from utils.config import AuthConfig

logger = logging.getLogger(__name__)


class JwtTokenProvider:
    def __init__(self, config: AuthConfig):
        self.config = config

    def issue(self, subject: str) -> str:
        """Create a signed token carrying only the subject and its lifetime."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self.config.expires_in,
        }
        return jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)

    def verify(self, token: str) -> str | None:
        try:
            payload = jwt.decode(token, self.config.secret, algorithms=[self.config.algorithm])
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            return None
        return payload.get("sub")
