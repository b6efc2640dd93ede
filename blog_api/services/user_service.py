"""
User service: business rules for the User aggregate.

Owns identity and timestamp assignment and the whole credential
lifecycle: plaintext passwords are hashed on create and on rotation
(update with a new password) and dropped straight after.  Persistence is
delegated to a ``UserRepository``; its ``NotFoundError`` / ``StorageError``
pass through untouched.
"""
import dataclasses
import logging
from uuid import UUID, uuid4

from blog_api.entities import User, touch, utcnow
from blog_api.repositories.base import UserRepository
from blog_api.schemas import UserCreate, UserUpdate
from blog_api.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository, hasher: PasswordHasher) -> None:
        self.repository = repository
        self.hasher = hasher

    async def find(self, user_id: UUID) -> User:
        return await self.repository.find(user_id)

    async def find_all(self) -> list[User]:
        return await self.repository.find_all()

    async def find_by_email(self, email: str) -> User:
        return await self.repository.find_by_email(email)

    async def count(self) -> int:
        return await self.repository.count()

    async def create(self, data: UserCreate) -> User:
        """
        Register a new user.

        Email uniqueness is enforced by storage; a duplicate surfaces as
        StorageError from the repository.
        """
        now = utcnow()
        user = User(
            id=uuid4(),
            username=data.username,
            email=data.email,
            password_hash=self.hasher.hash(data.password),
            created_at=now,
            updated_at=now,
        )
        created = await self.repository.create(user)
        logger.info("Created user %s", created.id)
        return created

    async def update(self, user_id: UUID, data: UserUpdate) -> User:
        """
        Apply a partial update.

        Only fields present (and non-null) in *data* overwrite the stored
        user.  A new password is re-hashed with a fresh salt.
        """
        current = await self.repository.find(user_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        password = changes.pop("password", None)
        if password is not None:
            changes["password_hash"] = self.hasher.hash(password)

        user = dataclasses.replace(current, **changes, updated_at=touch(current.updated_at))
        updated = await self.repository.update(user_id, user)
        logger.info(
            "Updated user %s (%s)",
            user_id,
            ", ".join(sorted(changes)) or "no field changes",
        )
        return updated

    async def delete(self, user_id: UUID) -> None:
        await self.repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

    def verify_password(self, user: User, password: str) -> bool:
        """Check *password* against the user's stored hash."""
        return self.hasher.verify(password, user.password_hash)
