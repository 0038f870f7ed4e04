"""Tests for repository functions."""

import pytest
from sqlalchemy.exc import IntegrityError

from blogapi.extensions import db
from blogapi.models import Blog
from blogapi.repositories.user import (
    get_user_by_id,
    get_user_by_username,
    get_user_by_token_hash,
    create_user,
    set_user_token_hash,
)
from blogapi.repositories.blog import (
    get_blog_by_id,
    paginate_verified_blogs,
    insert_blog,
    update_blog_fields,
    set_blog_verified,
)
from blogapi.utils.crypto import hash_api_token


class TestUserRepository:
    """Test cases for user repository functions."""

    def test_get_user_by_id(self, app, owner):
        assert get_user_by_id(owner.id).username == 'owner'
        assert get_user_by_id(9999) is None

    def test_get_user_by_username(self, app, owner):
        assert get_user_by_username('owner').id == owner.id
        assert get_user_by_username('nobody') is None

    def test_get_user_by_token_hash(self, app, owner):
        assert get_user_by_token_hash(hash_api_token('owner-token')).id == owner.id
        assert get_user_by_token_hash(hash_api_token('wrong')) is None

    def test_create_user(self, app):
        user = create_user(username='fresh', api_token_hash=hash_api_token('t'))
        assert user.id is not None
        assert get_user_by_username('fresh').id == user.id

    def test_create_user_conflict(self, app, owner):
        with pytest.raises(ValueError, match='username_conflict'):
            create_user(username='owner', api_token_hash=hash_api_token('another'))

    def test_set_user_token_hash(self, app, owner):
        set_user_token_hash(owner, hash_api_token('rotated'))
        assert get_user_by_token_hash(hash_api_token('rotated')).id == owner.id
        assert get_user_by_token_hash(hash_api_token('owner-token')) is None


class TestBlogRepository:
    """Test cases for blog repository functions."""

    def test_get_blog_by_id(self, app, draft_blog):
        assert get_blog_by_id(draft_blog.id).title == 'Draft'
        assert get_blog_by_id(9999) is None

    def test_insert_blog(self, app, owner):
        blog = insert_blog(title='T', description='D', article='A', user_id=owner.id)
        assert blog.id is not None
        assert blog.user_id == owner.id
        assert blog.verified is False

    def test_insert_blog_rolls_back_on_error(self, app, owner):
        count = db.session.query(Blog).count()
        with pytest.raises(IntegrityError):
            insert_blog(title='T', description='D', article='A', user_id=None)
        assert db.session.query(Blog).count() == count

    def test_update_blog_fields(self, app, draft_blog):
        update_blog_fields(draft_blog, title='New', description='ND', article='NA')
        db.session.expire_all()
        blog = get_blog_by_id(draft_blog.id)
        assert (blog.title, blog.description, blog.article) == ('New', 'ND', 'NA')
        assert blog.updated_at is not None

    def test_set_blog_verified(self, app, draft_blog):
        set_blog_verified(draft_blog)
        db.session.expire_all()
        assert get_blog_by_id(draft_blog.id).verified is True

    def test_paginate_only_verified(self, app, make_blog):
        make_blog(title='hidden', verified=False)
        shown = make_blog(title='shown', verified=True)
        pag = paginate_verified_blogs(page=1, per_page=20)
        assert [b.id for b in pag.items] == [shown.id]
        assert pag.total == 1

    def test_paginate_newest_first(self, app, many_verified_blogs):
        pag = paginate_verified_blogs(page=1, per_page=20)
        titles = [b.title for b in pag.items]
        assert titles[0] == 'Blog 24'
        assert titles[-1] == 'Blog 5'

    def test_get_blog_by_id_beyond_integer_range(self, app, draft_blog):
        assert get_blog_by_id(2**63) is None
        assert get_blog_by_id(99999999999999999999) is None
        assert get_blog_by_id(0) is None

    def test_paginate_out_of_range_is_empty(self, app, many_verified_blogs):
        pag = paginate_verified_blogs(page=7, per_page=20)
        assert pag.items == []
        assert pag.total == 25
