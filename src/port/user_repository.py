from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user. Raise ConflictError if the email is taken."""
        ...

    def save(self, user: User) -> User:
        """Persist changes to an existing user and return it."""
        ...

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def find_all_providers(self, except_user_id: str | None = None) -> list[User]:
        """List every user, optionally leaving one out."""
        ...
