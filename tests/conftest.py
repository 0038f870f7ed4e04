"""Test configuration and fixtures for the blog API."""

from datetime import datetime, timezone, timedelta
from typing import Callable, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blogapi import create_app
from blogapi.extensions import db
from blogapi.models import User, Blog
from blogapi.services.auth import AuthContext
from blogapi.utils.crypto import hash_api_token

OWNER_TOKEN = "owner-token"
OTHER_TOKEN = "other-token"


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'SERVER_NAME': 'localhost',
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        # Cleanup
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture(autouse=True)
def db_session(app: Flask):
    """Expose the session bound to the test's app context."""
    yield db.session


def _make_user(username: str, token: str) -> User:
    user = User(username=username, api_token_hash=hash_api_token(token))
    db.session.add(user)
    db.session.commit()
    db.session.refresh(user)
    return user


@pytest.fixture
def owner(app: Flask) -> User:
    """The user who writes the blogs under test."""
    return _make_user('owner', OWNER_TOKEN)


@pytest.fixture
def other_user(app: Flask) -> User:
    """A second, unrelated user."""
    return _make_user('other', OTHER_TOKEN)


@pytest.fixture
def owner_ctx(owner: User) -> AuthContext:
    return AuthContext(user_id=owner.id)


@pytest.fixture
def other_ctx(other_user: User) -> AuthContext:
    return AuthContext(user_id=other_user.id)


@pytest.fixture
def owner_headers() -> dict:
    return {'Authorization': f'Bearer {OWNER_TOKEN}'}


@pytest.fixture
def other_headers() -> dict:
    return {'Authorization': f'Bearer {OTHER_TOKEN}'}


@pytest.fixture
def make_blog(app: Flask, owner: User) -> Callable[..., Blog]:
    """Factory inserting blogs directly through the ORM."""
    def _make(
        title: str = 'Test Blog',
        description: str = 'A test description',
        article: str = 'The article body.',
        verified: bool = False,
        user: User | None = None,
        created_at: datetime | None = None,
    ) -> Blog:
        blog = Blog(
            title=title,
            description=description,
            article=article,
            verified=verified,
            user_id=(user or owner).id,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db.session.add(blog)
        db.session.commit()
        db.session.refresh(blog)
        return blog

    return _make


@pytest.fixture
def draft_blog(make_blog) -> Blog:
    """An unverified blog belonging to the owner."""
    return make_blog(title='Draft', verified=False)


@pytest.fixture
def verified_blog(make_blog) -> Blog:
    """A verified blog belonging to the owner."""
    return make_blog(title='Published', verified=True)


@pytest.fixture
def many_verified_blogs(make_blog) -> list[Blog]:
    """25 verified blogs with strictly increasing creation times."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        make_blog(title=f'Blog {i}', verified=True, created_at=start + timedelta(minutes=i))
        for i in range(25)
    ]
