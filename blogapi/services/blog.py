"""Blog resource operations.

Each operation receives the caller as an explicit :class:`AuthContext` and
either returns the resulting record(s) or raises one of the errors in
:mod:`blogapi.errors`. Validation and ownership checks always run before the
store is touched for writing.
"""
from __future__ import annotations

import sys
from typing import Any

import structlog
from flask_sqlalchemy.pagination import Pagination
from sqlalchemy.exc import SQLAlchemyError

from blogapi.errors import (
    Forbidden,
    MessageKey,
    NotFound,
    PersistenceError,
    Unauthorized,
    ValidationError,
)
from blogapi.models.blog import Blog
from blogapi.repositories.blog import (
    get_blog_by_id,
    insert_blog,
    paginate_verified_blogs,
    set_blog_verified,
    update_blog_fields,
)
from blogapi.schemas.blogs import BlogInput, validate_blog_input
from blogapi.services.auth import AuthContext
from blogapi.utils.db_retry import safe_db_operation

PER_PAGE = 20
# Highest page whose OFFSET still fits a signed 64-bit integer
MAX_PAGE = sys.maxsize // PER_PAGE

log = structlog.get_logger(__name__)


def _require_caller(caller: AuthContext) -> None:
    if not caller.is_authenticated:
        raise Unauthorized()


def _validated(data: Any) -> BlogInput:
    payload, failed = validate_blog_input(data)
    if failed:
        raise ValidationError(failed)
    return payload


def list_blogs(page: int = 1) -> Pagination:
    """Verified blogs, newest first, PER_PAGE at a time."""
    return safe_db_operation(paginate_verified_blogs, page=min(max(1, page), MAX_PAGE), per_page=PER_PAGE)


def create_blog(caller: AuthContext, data: Any) -> Blog:
    _require_caller(caller)
    payload = _validated(data)
    try:
        blog = insert_blog(
            title=payload.title,
            description=payload.description,
            article=payload.article,
            user_id=caller.user_id,
        )
    except SQLAlchemyError as e:
        log.error("blog_create_failed", user_id=caller.user_id, error=str(e))
        raise PersistenceError(MessageKey.BLOG_NOT_CREATED) from e
    log.info("blog_created", blog_id=blog.id, user_id=caller.user_id)
    return blog


def show_blog(caller: AuthContext, blog_id: int) -> Blog:
    try:
        blog = safe_db_operation(get_blog_by_id, blog_id)
    except SQLAlchemyError as e:
        log.error("blog_lookup_failed", blog_id=blog_id, error=str(e))
        raise NotFound() from e
    if blog is None:
        raise NotFound()
    if not blog.verified and not blog.is_owned_by(caller.user_id):
        raise Forbidden()
    return blog


def update_blog(caller: AuthContext, blog_id: int, data: Any) -> Blog:
    _require_caller(caller)
    payload = _validated(data)
    try:
        blog = safe_db_operation(get_blog_by_id, blog_id)
    except SQLAlchemyError as e:
        log.error("blog_lookup_failed", blog_id=blog_id, user_id=caller.user_id, error=str(e))
        raise PersistenceError(MessageKey.BLOG_NOT_UPDATED) from e
    if blog is None:
        raise NotFound()
    # Verified blogs are frozen, even for their owner
    if not blog.is_owned_by(caller.user_id) or blog.verified:
        raise Forbidden()
    try:
        update_blog_fields(
            blog,
            title=payload.title,
            description=payload.description,
            article=payload.article,
        )
    except SQLAlchemyError as e:
        log.error("blog_update_failed", blog_id=blog_id, user_id=caller.user_id, error=str(e))
        raise PersistenceError(MessageKey.BLOG_NOT_UPDATED) from e
    log.info("blog_updated", blog_id=blog.id, user_id=caller.user_id)
    return blog


def verify_blog(blog_id: int) -> Blog:
    """Moderation step: mark a blog verified, publishing and freezing it."""
    blog = get_blog_by_id(blog_id)
    if blog is None:
        raise NotFound()
    if not blog.verified:
        set_blog_verified(blog)
        log.info("blog_verified", blog_id=blog.id)
    return blog
