"""In-memory implementation of HashProvider for testing.

The "digest" is the plain text itself, which keeps assertions readable.
"""


class FakeHashProvider:
    def hash(self, plain: str) -> str:
        return plain

    def compare_hash(self, plain: str, digest: str) -> bool:
        return plain == digest
