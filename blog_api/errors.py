"""
Error taxonomy shared by every layer of the blog API.

Repositories raise ``NotFoundError`` and ``StorageError`` only; driver and
ORM exceptions are translated once, at the storage boundary, and never
escape it.  Services pass those through untouched and raise
``InternalError`` when they are the source of a failure (e.g. hashing).
``ValidationError`` belongs to the transport layer: input is checked
before any service is called.

Each class carries the HTTP status the transport adapter maps it to.
"""


class BlogError(Exception):
    """Base class for every error the domain layer may surface."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(BlogError):
    status_code = 404

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key


class ValidationError(BlogError):
    status_code = 400


class StorageError(BlogError):
    """Any failure originating in the persistence layer."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__("Storage error")
        self.detail = detail


class InternalError(BlogError):
    status_code = 500
