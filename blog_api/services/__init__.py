# Services package.
#
# One class per domain aggregate, each owning the business rules for it:
#
#   UserService     - identity, timestamps, password hashing / rotation
#   PostService     - identity, timestamps, unpublished-by-default, merge updates
#   CommentService  - identity, timestamps, merge updates
#
# Services receive their repository (and, for users, the password hasher)
# through the constructor; ``blog_api.dependencies`` wires the SQL
# implementations for the HTTP layer.
from blog_api.services.comment_service import CommentService
from blog_api.services.post_service import PostService
from blog_api.services.user_service import UserService

__all__ = ["CommentService", "PostService", "UserService"]
