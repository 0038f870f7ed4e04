from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from flask import Request
from flask_login import current_user

from blogapi.models.user import User
from blogapi.repositories.user import (
    create_user as _create_user,
    get_user_by_token_hash,
    get_user_by_username,
    set_user_token_hash,
)
from blogapi.utils.crypto import generate_api_token, hash_api_token
from blogapi.utils.db_retry import safe_db_operation

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, handed explicitly to every blog operation."""

    user_id: int | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def for_user(cls, user: User | None) -> "AuthContext":
        if user is None or not getattr(user, "is_authenticated", False):
            return cls()
        return cls(user_id=user.id)


def current_auth_context() -> AuthContext:
    """Build an AuthContext from Flask-Login's current user."""
    return AuthContext.for_user(current_user._get_current_object())


def extract_bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


def authenticate_token(token: str | None) -> User | None:
    if not token:
        return None
    return safe_db_operation(get_user_by_token_hash, hash_api_token(token))


def load_user_from_request(request: Request) -> User | None:
    return authenticate_token(extract_bearer_token(request))


def create_user(username: str) -> Tuple[User, str]:
    """
    Create a user and issue its first API token.
    Returns (user, token); the token is not recoverable afterwards.
    """
    token = generate_api_token()
    user = _create_user(username=username, api_token_hash=hash_api_token(token))
    return user, token


def rotate_token(username: str) -> Tuple[User | None, str | None]:
    user = get_user_by_username(username)
    if not user:
        return None, None
    token = generate_api_token()
    set_user_token_hash(user, hash_api_token(token))
    return user, token
