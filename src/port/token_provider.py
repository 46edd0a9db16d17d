from typing import Protocol


class TokenProvider(Protocol):
    """Issues and verifies signed session tokens."""
    def issue(self, subject: str) -> str:
        """Return a signed token whose subject claim is `subject`."""
        ...

    def verify(self, token: str) -> str | None:
        """Return the subject of a valid token, None otherwise."""
        ...
