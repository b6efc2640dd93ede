from abc import ABC, abstractmethod
from uuid import UUID

from blog_api.entities import Comment, Post, User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find(self, user_id: UUID) -> User:
        """Return the user or raise NotFoundError"""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return every user, newest first"""

    @abstractmethod
    async def find_by_email(self, email: str) -> User:
        """Return the user registered under *email* or raise NotFoundError"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a fully formed user and return it as persisted"""

    @abstractmethod
    async def update(self, user_id: UUID, user: User) -> User:
        """Overwrite the stored user and return it as persisted"""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Remove the user or raise NotFoundError"""

    @abstractmethod
    async def count(self) -> int:
        pass


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find(self, post_id: UUID) -> Post:
        pass

    @abstractmethod
    async def find_all(self) -> list[Post]:
        """Return every post, newest first"""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def update(self, post_id: UUID, post: Post) -> Post:
        pass

    @abstractmethod
    async def delete(self, post_id: UUID) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class CommentRepository(ABC):
    """Repository interface - defines contract for comment data access"""

    @abstractmethod
    async def find(self, comment_id: UUID) -> Comment:
        pass

    @abstractmethod
    async def find_by_post(self, post_id: UUID) -> list[Comment]:
        """Return the comments attached to *post_id*, oldest first"""

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def update(self, comment_id: UUID, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def delete(self, comment_id: UUID) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
