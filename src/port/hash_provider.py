from typing import Protocol


class HashProvider(Protocol):
    """One-way password hashing."""
    def hash(self, plain: str) -> str: ...

    def compare_hash(self, plain: str, digest: str) -> bool: ...
