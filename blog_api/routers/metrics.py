from fastapi import APIRouter, Depends, Request

from blog_api.dependencies import get_comment_service, get_post_service, get_user_service
from blog_api.schemas import MetricsResponse
from blog_api.services import CommentService, PostService, UserService

router = APIRouter(prefix="/api/v1/metrics", tags=["metrics"])

@router.get("", response_model=MetricsResponse)
async def get_metrics(
    request: Request,
    users: UserService = Depends(get_user_service),
    posts: PostService = Depends(get_post_service),
    comments: CommentService = Depends(get_comment_service),
):
    total_users = await users.count()

    total_posts = await posts.count()

    total_comments = await comments.count()

    avg_comments = total_comments / total_posts if total_posts > 0 else 0

    engine = getattr(request.app.state, "engine", None)
    return MetricsResponse(
        total_users=total_users,
        total_posts=total_posts,
        total_comments=total_comments,
        avg_comments_per_post=round(avg_comments, 2),
        pool=engine.pool.status() if engine is not None else "unavailable",
    )
