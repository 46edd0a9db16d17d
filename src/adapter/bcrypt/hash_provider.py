"""bcrypt implementation of HashProvider."""

import bcrypt

BCRYPT_ROUNDS = 12


class BCryptHashProvider:
    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")

    def compare_hash(self, plain: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt digest.
            return False
