import logging
import re

import bcrypt

from blog_api.errors import InternalError

logger = logging.getLogger(__name__)

# $2b$<cost>$ followed by a 22-char salt and a 31-char digest (bcrypt base64).
_HASH_RE = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}\Z")


class PasswordHasher:
    """
    One-way salted password hashing backed by bcrypt.

    Hashes are self-describing (``$2b$<cost>$<salt><digest>``), so
    verification needs nothing but the stored string.  A fresh salt is
    drawn from the OS CSPRNG on every call to :meth:`hash`.
    """

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a plain password.

        Raises:
            InternalError: if bcrypt rejects the input (e.g. longer than
                72 bytes once encoded).
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        except ValueError as exc:
            logger.error("Password hashing failed: %s", type(exc).__name__)
            raise InternalError("Password hashing failed") from exc
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Check *password* against a stored bcrypt hash.

        Returns False on mismatch.  A malformed stored hash raises
        InternalError instead of propagating bcrypt's own error.
        """
        if not _HASH_RE.match(hashed_password):
            logger.error("Stored password hash is malformed")
            raise InternalError("Password verification failed")
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except ValueError as exc:
            logger.error("Stored password hash could not be parsed")
            raise InternalError("Password verification failed") from exc
