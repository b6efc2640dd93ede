from datetime import datetime
from uuid import UUID

from email_validator import validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt only reads the first 72 bytes of its input.
PASSWORD_MAX_BYTES = 72


def _check_password_bytes(value: str | None) -> str | None:
    if value is not None and len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


def _check_email(value: str | None) -> str | None:
    # Syntax only; the address is stored and matched exactly as submitted.
    if value is not None:
        validate_email(value, check_deliverability=False)
    return value


# --- User ---

class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str
    password: str = Field(min_length=8)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)

    @field_validator("email")
    @classmethod
    def email_is_well_formed(cls, value):
        return _check_email(value)


class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=3, max_length=50)
    email: str | None = None
    password: str | None = Field(None, min_length=8)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)

    @field_validator("email")
    @classmethod
    def email_is_well_formed(cls, value):
        return _check_email(value)


class UserResponse(BaseModel):
    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Post ---

class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    author_id: UUID


class PostUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=100)
    content: str | None = Field(None, min_length=1)
    published: bool | None = None


class PostResponse(BaseModel):
    id: UUID
    title: str
    content: str
    author_id: UUID
    published: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Comment ---

class CommentCreate(BaseModel):
    content: str = Field(min_length=1)
    post_id: UUID
    author_id: UUID


class CommentUpdate(BaseModel):
    content: str | None = Field(None, min_length=1)


class CommentResponse(BaseModel):
    id: UUID
    content: str
    post_id: UUID
    author_id: UUID
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Metrics ---

class MetricsResponse(BaseModel):
    total_users: int
    total_posts: int
    total_comments: int
    avg_comments_per_post: float
    pool: str


# --- Errors ---

class ErrorResponse(BaseModel):
    error: str
