import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone


@dataclass
class User:
    """Domain model representing a user (customers and providers alike)."""
    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def create(name: str, email: str, password_hash: str) -> 'User':
        now = datetime.now(timezone.utc)
        return User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def public_dict(self) -> dict:
        """Serializable view without the password digest."""
        return {k: v for k, v in asdict(self).items() if k != 'password_hash'}
