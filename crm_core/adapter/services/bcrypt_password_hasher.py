"""
Password hashing and verification using bcrypt.
"""

import bcrypt

from crm_core.app.services.password_hasher import PasswordHasher

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
