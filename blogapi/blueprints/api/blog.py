from __future__ import annotations

from typing import Any

from flask import jsonify, request, url_for
from flask_login import login_required
from flask_sqlalchemy.pagination import Pagination

from blogapi.extensions import limiter
from blogapi.models.blog import Blog
from blogapi.services.auth import current_auth_context
from blogapi.services.blog import (
    create_blog,
    list_blogs,
    show_blog,
    update_blog,
)

from blogapi.blueprints.blog import bp


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def blog_payload(blog: Blog) -> dict[str, Any]:
    return {
        "id": blog.id,
        "title": blog.title,
        "description": blog.description,
        "article": blog.article,
        "user_id": blog.user_id,
        "verified": bool(blog.verified),
        "created_at": _iso(blog.created_at),
        "updated_at": _iso(blog.updated_at),
    }


def _page_url(page: int | None) -> str | None:
    if page is None:
        return None
    return url_for("blog.index", page=page, _external=True)


# Page links shown on each side of the current page
LINK_WINDOW = 3


def link_pages(current: int, last: int) -> list[int | None]:
    """Page numbers to link around the current page; None marks a gap."""
    anchor = min(current, last)
    lo = max(anchor - LINK_WINDOW, 1)
    hi = min(anchor + LINK_WINDOW, last)
    pages: list[int | None] = []
    if lo > 1:
        pages.append(1)
        if lo > 2:
            pages.append(None)
    pages.extend(range(lo, hi + 1))
    if hi < last:
        if hi < last - 1:
            pages.append(None)
        pages.append(last)
    return pages


def page_envelope(pag: Pagination) -> dict[str, Any]:
    """Render a page of blogs with current/last page, bounds and navigation links."""
    items = [blog_payload(b) for b in pag.items]
    last_page = max(pag.pages, 1)
    first_index = pag.first if items else None
    last_index = pag.last if items else None
    prev_page = pag.page - 1 if pag.page > 1 else None
    next_page = pag.page + 1 if pag.page < last_page else None

    links = [{"url": _page_url(prev_page), "label": "&laquo; Previous", "active": False}]
    for n in link_pages(pag.page, last_page):
        if n is None:
            links.append({"url": None, "label": "...", "active": False})
        else:
            links.append({"url": _page_url(n), "label": str(n), "active": n == pag.page})
    links.append({"url": _page_url(next_page), "label": "Next &raquo;", "active": False})

    return {
        "current_page": pag.page,
        "data": items,
        "first_page_url": _page_url(1),
        "from": first_index,
        "last_page": last_page,
        "last_page_url": _page_url(last_page),
        "links": links,
        "next_page_url": _page_url(next_page),
        "path": url_for("blog.index", _external=True),
        "per_page": pag.per_page,
        "prev_page_url": _page_url(prev_page),
        "to": last_index,
        "total": pag.total,
    }


@bp.get("/blog")
@limiter.limit("120 per minute")
def index():
    """List verified blogs, 20 per page"""
    page = request.args.get("page", 1, type=int)
    return jsonify(page_envelope(list_blogs(page=page)))


@bp.post("/blog")
@limiter.limit("10 per minute")
@login_required
def store():
    """Create a blog owned by the caller"""
    data = request.get_json(silent=True)
    blog = create_blog(current_auth_context(), data)
    return jsonify(blog_payload(blog))


@bp.get("/blog/<int:blog_id>")
@limiter.limit("120 per minute")
def show(blog_id: int):
    """Get one blog; unverified blogs are visible to their owner only"""
    blog = show_blog(current_auth_context(), blog_id)
    return jsonify(blog_payload(blog))


@bp.put("/blog/<int:blog_id>")
@limiter.limit("10 per minute")
@login_required
def update(blog_id: int):
    """Edit an unverified blog owned by the caller"""
    data = request.get_json(silent=True)
    blog = update_blog(current_auth_context(), blog_id, data)
    return jsonify(blog_payload(blog))
