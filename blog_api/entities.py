"""
Domain entities.

Plain dataclasses with no ORM or transport coupling; repositories convert
to and from their storage representation.  Timestamps are naive UTC.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

_TICK = timedelta(microseconds=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def touch(previous: datetime) -> datetime:
    """Return a fresh ``updated_at`` guaranteed to be later than *previous*."""
    now = utcnow()
    if now <= previous:
        return previous + _TICK
    return now


@dataclass
class User:
    id: UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass
class Post:
    id: UUID
    title: str
    content: str
    author_id: UUID
    published: bool
    created_at: datetime
    updated_at: datetime


@dataclass
class Comment:
    id: UUID
    content: str
    post_id: UUID
    author_id: UUID
    created_at: datetime
    updated_at: datetime
