from uuid import UUID

from fastapi import APIRouter, Depends

from blog_api.dependencies import get_post_service
from blog_api.schemas import PostCreate, PostResponse, PostUpdate
from blog_api.services import PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])

@router.get("", response_model=list[PostResponse])
async def list_posts(service: PostService = Depends(get_post_service)):
    return [PostResponse.model_validate(p) for p in await service.find_all()]

@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, service: PostService = Depends(get_post_service)):
    return PostResponse.model_validate(await service.find(post_id))

@router.post("", status_code=201, response_model=PostResponse)
async def create_post(data: PostCreate, service: PostService = Depends(get_post_service)):
    return PostResponse.model_validate(await service.create(data))

@router.put("/{post_id}", response_model=PostResponse)
async def update_post(post_id: UUID, data: PostUpdate, service: PostService = Depends(get_post_service)):
    return PostResponse.model_validate(await service.update(post_id, data))

@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: UUID, service: PostService = Depends(get_post_service)):
    await service.delete(post_id)
