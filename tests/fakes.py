"""
In-memory implementations of the repository contracts.

They follow the same rules as the SQL repositories (copies in, copies out,
NotFoundError on a missing id, ``id``/``created_at`` never rewritten) so
the services can be tested without a database.  No cascade: deleting a
post leaves its comments in place.
"""
from dataclasses import replace
from uuid import UUID

from blog_api.entities import Comment, Post, User
from blog_api.errors import NotFoundError
from blog_api.repositories.base import CommentRepository, PostRepository, UserRepository


class _InMemoryRepository:
    entity_name = "Entity"

    def __init__(self) -> None:
        self.rows: dict[UUID, object] = {}

    async def find(self, entity_id: UUID):
        if entity_id not in self.rows:
            raise NotFoundError(self.entity_name, entity_id)
        return replace(self.rows[entity_id])

    async def create(self, entity):
        self.rows[entity.id] = replace(entity)
        return replace(entity)

    async def update(self, entity_id: UUID, entity):
        if entity_id not in self.rows:
            raise NotFoundError(self.entity_name, entity_id)
        stored = replace(entity, id=entity_id, created_at=self.rows[entity_id].created_at)
        self.rows[entity_id] = stored
        return replace(stored)

    async def delete(self, entity_id: UUID) -> None:
        if self.rows.pop(entity_id, None) is None:
            raise NotFoundError(self.entity_name, entity_id)

    async def count(self) -> int:
        return len(self.rows)


class InMemoryUserRepository(_InMemoryRepository, UserRepository):
    entity_name = "User"

    async def find_all(self) -> list[User]:
        users = sorted(self.rows.values(), key=lambda u: u.created_at, reverse=True)
        return [replace(u) for u in users]

    async def find_by_email(self, email: str) -> User:
        for user in self.rows.values():
            if user.email == email:
                return replace(user)
        raise NotFoundError(self.entity_name, email)


class InMemoryPostRepository(_InMemoryRepository, PostRepository):
    entity_name = "Post"

    async def find_all(self) -> list[Post]:
        posts = sorted(self.rows.values(), key=lambda p: p.created_at, reverse=True)
        return [replace(p) for p in posts]


class InMemoryCommentRepository(_InMemoryRepository, CommentRepository):
    entity_name = "Comment"

    async def find_by_post(self, post_id: UUID) -> list[Comment]:
        comments = [c for c in self.rows.values() if c.post_id == post_id]
        return [replace(c) for c in sorted(comments, key=lambda c: c.created_at)]
