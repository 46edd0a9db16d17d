"""Auth services — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import AuthError, ConflictError, ValidationError
from domain.model.user import User
from port.hash_provider import HashProvider
from port.token_provider import TokenProvider
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Incorrect email/password combination."
MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthResult:
    """Authenticated user plus the session token issued for it.

    `user` still carries its password digest; strip it before exposing.
    """
    user: User
    token: str


class CreateUserService:
    def __init__(self, users_repository: UserRepository, hash_provider: HashProvider):
        self.users_repository = users_repository
        self.hash_provider = hash_provider

    def execute(self, name: str, email: str, password: str) -> User:
        """Register a new user.

        Raises:
            ConflictError: email already registered
            ValidationError: password too short
        """
        if self.users_repository.find_by_email(email):
            raise ConflictError("Email address already used.")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        user = self.users_repository.create(
            name=name,
            email=email,
            password_hash=self.hash_provider.hash(password),
        )
        logger.info("User registered", extra={"userId": user.id, "email": email})
        return user


class AuthenticateUserService:
    def __init__(
        self,
        users_repository: UserRepository,
        hash_provider: HashProvider,
        token_provider: TokenProvider,
    ):
        self.users_repository = users_repository
        self.hash_provider = hash_provider
        self.token_provider = token_provider

    def execute(self, email: str, password: str) -> AuthResult:
        """Authenticate a user by email and password.

        Unknown email and wrong password fail with the same error, so the
        caller can't tell which one was wrong.

        Raises:
            ValidationError: email or password empty
            AuthError: invalid credentials
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        user = self.users_repository.find_by_email(email)
        if not user or not self.hash_provider.compare_hash(password, user.password_hash):
            logger.warning("Authentication failed", extra={"email": email})
            raise AuthError(INVALID_CREDENTIALS)

        token = self.token_provider.issue(user.id)
        logger.info("User authenticated", extra={"userId": user.id})
        return AuthResult(user=user, token=token)
