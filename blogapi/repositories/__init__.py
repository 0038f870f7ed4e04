# Import all repository functions to maintain compatibility
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

__all__ = [
    # User repositories
    "get_user_by_id",
    "get_user_by_username",
    "get_user_by_token_hash",
    "create_user",
    "set_user_token_hash",
    # Blog repositories
    "get_blog_by_id",
    "paginate_verified_blogs",
    "insert_blog",
    "update_blog_fields",
    "set_blog_verified",
]
