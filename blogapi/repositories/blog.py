from __future__ import annotations

from typing import Optional

from flask_sqlalchemy.pagination import Pagination
from sqlalchemy.exc import SQLAlchemyError

from blogapi.extensions import db
from blogapi.models.blog import Blog

# Primary keys are signed 64-bit at most; larger ids cannot exist
MAX_BLOG_ID = 2**63 - 1


def get_blog_by_id(blog_id: int) -> Optional[Blog]:
    if not 0 < blog_id <= MAX_BLOG_ID:
        return None
    return db.session.get(Blog, blog_id)


def paginate_verified_blogs(page: int = 1, per_page: int = 20) -> Pagination:
    stmt = (
        db.select(Blog)
        .filter_by(verified=True)
        .order_by(Blog.created_at.desc(), Blog.id.desc())
    )
    return db.paginate(stmt, page=page, per_page=per_page, max_per_page=per_page, error_out=False)


def insert_blog(*, title: str, description: str, article: str, user_id: int) -> Blog:
    blog = Blog(
        title=title,
        description=description,
        article=article,
        user_id=user_id,
        verified=False,
    )
    db.session.add(blog)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return blog


def update_blog_fields(blog: Blog, *, title: str, description: str, article: str) -> Blog:
    blog.title = title
    blog.description = description
    blog.article = article
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return blog


def set_blog_verified(blog: Blog, verified: bool = True) -> Blog:
    blog.verified = verified
    db.session.commit()
    return blog
