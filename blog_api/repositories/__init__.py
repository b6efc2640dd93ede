# Repositories package.
#
# ``base`` holds the storage-agnostic contracts, one ABC per entity kind;
# ``sql`` binds them to SQLAlchemy.  Services depend only on the contracts,
# so any implementation (including the in-memory fakes used by the tests)
# can be swapped in.
from blog_api.repositories.base import CommentRepository, PostRepository, UserRepository
from blog_api.repositories.sql import (
    SqlCommentRepository,
    SqlPostRepository,
    SqlUserRepository,
)

__all__ = [
    "CommentRepository",
    "PostRepository",
    "UserRepository",
    "SqlCommentRepository",
    "SqlPostRepository",
    "SqlUserRepository",
]
