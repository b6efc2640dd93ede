"""
FastAPI dependency providers.

The engine and its session factory are created once by the application
lifespan and parked on ``app.state``; everything below only hands that
shared handle to the repositories.  Repositories and services are
stateless, so building them per request costs nothing and keeps each
request's wiring explicit.

Tests override :func:`get_session_factory` to point at their own engine.
"""
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog_api.config import settings
from blog_api.repositories import SqlCommentRepository, SqlPostRepository, SqlUserRepository
from blog_api.security import PasswordHasher
from blog_api.services import CommentService, PostService, UserService


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def get_user_service(
    sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(SqlUserRepository(sessions), hasher)


def get_post_service(
    sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> PostService:
    return PostService(SqlPostRepository(sessions))


def get_comment_service(
    sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> CommentService:
    return CommentService(SqlCommentRepository(sessions))
