from __future__ import annotations

import secrets
from hashlib import sha256


def generate_api_token() -> str:
    return secrets.token_urlsafe(32)


def hash_api_token(token: str) -> str:
    # Tokens are high-entropy random strings; an unsalted digest is enough to look them up
    return sha256(token.encode("utf-8")).hexdigest()
