"""
Comment service: business rules for comments on posts.

No post-existence check is made before inserting: a comment pointing at
a missing post or author is rejected by the storage layer's foreign keys
and surfaces as StorageError.
"""
import dataclasses
import logging
from uuid import UUID, uuid4

from blog_api.entities import Comment, touch, utcnow
from blog_api.repositories.base import CommentRepository
from blog_api.schemas import CommentCreate, CommentUpdate

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, repository: CommentRepository) -> None:
        self.repository = repository

    async def find(self, comment_id: UUID) -> Comment:
        return await self.repository.find(comment_id)

    async def find_by_post(self, post_id: UUID) -> list[Comment]:
        return await self.repository.find_by_post(post_id)

    async def count(self) -> int:
        return await self.repository.count()

    async def create(self, data: CommentCreate) -> Comment:
        now = utcnow()
        comment = Comment(
            id=uuid4(),
            content=data.content,
            post_id=data.post_id,
            author_id=data.author_id,
            created_at=now,
            updated_at=now,
        )
        created = await self.repository.create(comment)
        logger.info("Created comment %s on post %s", created.id, created.post_id)
        return created

    async def update(self, comment_id: UUID, data: CommentUpdate) -> Comment:
        current = await self.repository.find(comment_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        comment = dataclasses.replace(current, **changes, updated_at=touch(current.updated_at))
        updated = await self.repository.update(comment_id, comment)
        logger.info("Updated comment %s", comment_id)
        return updated

    async def delete(self, comment_id: UUID) -> None:
        await self.repository.delete(comment_id)
        logger.info("Deleted comment %s", comment_id)
