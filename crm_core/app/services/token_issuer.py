"""
Token Issuer/Verifier

Single-use secrets for invitations and password resets.
Only the SHA-256 hash is ever persisted; the raw value travels once in a link.
"""

import hashlib
import hmac
import secrets
from typing import NamedTuple

TOKEN_BYTES = 32  # 256 bits of entropy


class IssuedToken(NamedTuple):
    raw: str
    token_hash: str

    def __repr__(self) -> str:
        # Keep the raw secret out of logs and tracebacks
        return f"IssuedToken(token_hash={self.token_hash!r})"


def hash_token(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def issue_token() -> IssuedToken:
    raw = secrets.token_hex(TOKEN_BYTES)
    return IssuedToken(raw=raw, token_hash=hash_token(raw))


def verify_token(raw: str, stored_hash: str) -> bool:
    return hmac.compare_digest(hash_token(raw), stored_hash)
