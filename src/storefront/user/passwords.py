"""Password hashing with bcrypt."""

import bcrypt
from protean.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt ignores (or rejects) anything beyond this


class PasswordHasher:
    """Hashes and verifies passwords at a fixed bcrypt cost factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Compared against when the email is unknown so both login failures cost the same
        self._decoy_hash = bcrypt.hashpw(b"decoy-password", bcrypt.gensalt(rounds=rounds)).decode("ascii")

    def hash(self, raw_password: str) -> str:
        self.check_strength(raw_password)
        return bcrypt.hashpw(raw_password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, raw_password: str, password_hash: str | None) -> bool:
        encoded = raw_password.encode("utf-8")
        if password_hash is None or len(encoded) > MAX_PASSWORD_BYTES:
            bcrypt.checkpw(b"decoy-password", self._decoy_hash.encode("ascii"))
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("ascii"))
        except ValueError:
            # Malformed stored hash
            return False

    @staticmethod
    def check_strength(raw_password: str) -> None:
        if raw_password is None or len(raw_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"]})
        if len(raw_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError({"password": [f"Password must not exceed {MAX_PASSWORD_BYTES} bytes"]})
