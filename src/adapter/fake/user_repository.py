"""In-memory implementation of UserRepository for testing."""

from domain.model.errors import ConflictError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, password_hash: str) -> User:
        if self.find_by_email(email):
            raise ConflictError("Email address already used.")

        user = User.create(name=name, email=email, password_hash=password_hash)
        self.store[user.id] = user
        return user

    def save(self, user: User) -> User:
        owner = self.find_by_email(user.email)
        if owner and owner.id != user.id:
            raise ConflictError("Email already in use.")

        user.touch()
        self.store[user.id] = user
        return user

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def find_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)

    def find_all_providers(self, except_user_id: str | None = None) -> list[User]:
        return [u for u in self.store.values() if u.id != except_user_id]
