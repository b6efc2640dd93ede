"""
SQLAlchemy implementations of the repository contracts.

Design notes
------------
- Repositories hold nothing but the shared ``async_sessionmaker`` handle,
  so one instance can serve any number of concurrent requests.
- Every operation runs in its own short transaction
  (``session_factory.begin()``): committed on success, rolled back on any
  exception.  There are no cross-entity transactions.
- ``_transaction`` is the only place storage exceptions are caught.  Pool
  checkout timeouts, connection failures, constraint violations and driver
  errors all leave this module as ``StorageError``.
- Entities and records share field names, so conversion is generic.
- No validation, timestamping or id generation happens here.
"""
import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog_api.entities import Comment, Post, User
from blog_api.errors import NotFoundError, StorageError
from blog_api.models import CommentRecord, PostRecord, UserRecord
from blog_api.repositories.base import CommentRepository, PostRepository, UserRepository

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _storage_error(exc: Exception) -> StorageError:
    """Map a storage-layer exception to the domain's StorageError."""
    if isinstance(exc, PoolTimeoutError):
        detail = "connection pool exhausted: checkout timed out"
    elif isinstance(exc, IntegrityError):
        detail = f"constraint violation: {exc.orig}"
    elif isinstance(exc, DBAPIError):
        # ``orig`` carries the driver message without the bound parameters.
        detail = f"{type(exc.orig).__name__}: {exc.orig}"
    else:
        detail = f"{type(exc).__name__}: {exc}"
    logger.warning("Storage failure: %s", detail)
    return StorageError(detail)


class _SqlRepository(Generic[E]):
    entity_name: str
    entity_class: type
    record_class: type

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = session_factory

    # ------------------------------------------------------------------
    # Storage boundary
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._sessions.begin() as session:
                yield session
        except (SQLAlchemyError, OSError) as exc:
            raise _storage_error(exc) from exc

    # ------------------------------------------------------------------
    # Record <-> entity conversion
    # ------------------------------------------------------------------

    def _to_entity(self, record: Any) -> E:
        values = {f.name: getattr(record, f.name) for f in dataclasses.fields(self.entity_class)}
        return self.entity_class(**values)

    def _to_record(self, entity: E) -> Any:
        return self.record_class(**dataclasses.asdict(entity))

    async def _get_record(self, session: AsyncSession, entity_id: UUID) -> Any:
        record = await session.get(self.record_class, entity_id)
        if record is None:
            raise NotFoundError(self.entity_name, entity_id)
        return record

    # ------------------------------------------------------------------
    # Shared CRUD
    # ------------------------------------------------------------------

    async def find(self, entity_id: UUID) -> E:
        async with self._transaction() as session:
            record = await self._get_record(session, entity_id)
            return self._to_entity(record)

    async def create(self, entity: E) -> E:
        async with self._transaction() as session:
            record = self._to_record(entity)
            session.add(record)
            await session.flush()
            await session.refresh(record)
            return self._to_entity(record)

    async def update(self, entity_id: UUID, entity: E) -> E:
        """
        Overwrite every mutable column of the stored row with *entity*.

        ``id`` and ``created_at`` are never rewritten.
        """
        async with self._transaction() as session:
            record = await self._get_record(session, entity_id)
            for field in dataclasses.fields(self.entity_class):
                if field.name in ("id", "created_at"):
                    continue
                setattr(record, field.name, getattr(entity, field.name))
            await session.flush()
            await session.refresh(record)
            return self._to_entity(record)

    async def delete(self, entity_id: UUID) -> None:
        async with self._transaction() as session:
            result = await session.execute(
                delete(self.record_class).where(self.record_class.id == entity_id)
            )
            if result.rowcount == 0:
                raise NotFoundError(self.entity_name, entity_id)

    async def count(self) -> int:
        async with self._transaction() as session:
            result = await session.execute(select(func.count()).select_from(self.record_class))
            return result.scalar_one()


# ---------------------------------------------------------------------------
# Concrete repositories
# ---------------------------------------------------------------------------

class SqlUserRepository(_SqlRepository[User], UserRepository):
    entity_name = "User"
    entity_class = User
    record_class = UserRecord

    async def find_all(self) -> list[User]:
        async with self._transaction() as session:
            result = await session.execute(
                select(UserRecord).order_by(UserRecord.created_at.desc())
            )
            return [self._to_entity(r) for r in result.scalars().all()]

    async def find_by_email(self, email: str) -> User:
        async with self._transaction() as session:
            result = await session.execute(select(UserRecord).where(UserRecord.email == email))
            record = result.scalar_one_or_none()
            if record is None:
                raise NotFoundError(self.entity_name, email)
            return self._to_entity(record)


class SqlPostRepository(_SqlRepository[Post], PostRepository):
    entity_name = "Post"
    entity_class = Post
    record_class = PostRecord

    async def find_all(self) -> list[Post]:
        async with self._transaction() as session:
            result = await session.execute(
                select(PostRecord).order_by(PostRecord.created_at.desc())
            )
            return [self._to_entity(r) for r in result.scalars().all()]


class SqlCommentRepository(_SqlRepository[Comment], CommentRepository):
    entity_name = "Comment"
    entity_class = Comment
    record_class = CommentRecord

    async def find_by_post(self, post_id: UUID) -> list[Comment]:
        async with self._transaction() as session:
            result = await session.execute(
                select(CommentRecord)
                .where(CommentRecord.post_id == post_id)
                .order_by(CommentRecord.created_at.asc())
            )
            return [self._to_entity(r) for r in result.scalars().all()]
