"""Application settings, read once from the environment at startup."""

import os
from dataclasses import dataclass
from datetime import timedelta

from dotenv import load_dotenv


@dataclass(frozen=True)
class AuthConfig:
    """JWT signing configuration."""
    secret: str
    expires_in: timedelta = timedelta(days=1)
    algorithm: str = "HS256"


@dataclass(frozen=True)
class Settings:
    auth: AuthConfig
    mongo_url: str | None = None
    database_name: str = "gobarber"
    bcrypt_rounds: int = 12

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file if present).

        Raises:
            ValueError: JWT_SECRET_KEY is not set
        """
        load_dotenv()

        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        auth = AuthConfig(
            secret=secret,
            expires_in=timedelta(days=int(os.getenv("JWT_EXPIRES_IN_DAYS", "1"))),
            algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        )
        return cls(
            auth=auth,
            mongo_url=os.getenv("MONGO_URL"),
            database_name=os.getenv("MONGODB_DATABASE", "gobarber"),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
        )
