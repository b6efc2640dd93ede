from uuid import UUID

from fastapi import APIRouter, Depends

from blog_api.dependencies import get_comment_service
from blog_api.schemas import CommentCreate, CommentResponse, CommentUpdate
from blog_api.services import CommentService

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])

@router.get("/post/{post_id}", response_model=list[CommentResponse])
async def list_post_comments(post_id: UUID, service: CommentService = Depends(get_comment_service)):
    return [CommentResponse.model_validate(c) for c in await service.find_by_post(post_id)]

@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: UUID, service: CommentService = Depends(get_comment_service)):
    return CommentResponse.model_validate(await service.find(comment_id))

@router.post("", status_code=201, response_model=CommentResponse)
async def create_comment(data: CommentCreate, service: CommentService = Depends(get_comment_service)):
    return CommentResponse.model_validate(await service.create(data))

@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: UUID, data: CommentUpdate, service: CommentService = Depends(get_comment_service)
):
    return CommentResponse.model_validate(await service.update(comment_id, data))

@router.delete("/{comment_id}", status_code=204)
async def delete_comment(comment_id: UUID, service: CommentService = Depends(get_comment_service)):
    await service.delete(comment_id)
