"""
Post service: business rules for the Post aggregate.

Design notes
------------
- New posts are always created unpublished; publishing is an update.
- ``author_id`` arrives already resolved from the caller.  Whether it
  names an existing user is left to the storage layer's foreign key.
- Updates are field-level merges (``model_dump(exclude_unset=True)``):
  updating only ``title`` leaves ``content`` and ``published`` alone.
"""
import dataclasses
import logging
from uuid import UUID, uuid4

from blog_api.entities import Post, touch, utcnow
from blog_api.repositories.base import PostRepository
from blog_api.schemas import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, repository: PostRepository) -> None:
        self.repository = repository

    async def find(self, post_id: UUID) -> Post:
        return await self.repository.find(post_id)

    async def find_all(self) -> list[Post]:
        return await self.repository.find_all()

    async def count(self) -> int:
        return await self.repository.count()

    async def create(self, data: PostCreate) -> Post:
        now = utcnow()
        post = Post(
            id=uuid4(),
            title=data.title,
            content=data.content,
            author_id=data.author_id,
            published=False,
            created_at=now,
            updated_at=now,
        )
        created = await self.repository.create(post)
        logger.info("Created post %s by author %s", created.id, created.author_id)
        return created

    async def update(self, post_id: UUID, data: PostUpdate) -> Post:
        current = await self.repository.find(post_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        post = dataclasses.replace(current, **changes, updated_at=touch(current.updated_at))
        updated = await self.repository.update(post_id, post)
        logger.info("Updated post %s", post_id)
        return updated

    async def delete(self, post_id: UUID) -> None:
        await self.repository.delete(post_id)
        logger.info("Deleted post %s", post_id)
