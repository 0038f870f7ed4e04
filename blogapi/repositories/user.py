from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blogapi.extensions import db
from blogapi.models.user import User


def get_user_by_id(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def get_user_by_username(username: str) -> Optional[User]:
    return db.session.execute(db.select(User).filter_by(username=username)).scalar_one_or_none()


def get_user_by_token_hash(token_hash: str) -> Optional[User]:
    return db.session.execute(db.select(User).filter_by(api_token_hash=token_hash)).scalar_one_or_none()


def create_user(*, username: str, api_token_hash: str) -> User:
    user = User(username=username, api_token_hash=api_token_hash)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("username_conflict")
    return user


def set_user_token_hash(user: User, api_token_hash: str) -> User:
    user.api_token_hash = api_token_hash
    db.session.commit()
    return user
