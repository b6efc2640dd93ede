from uuid import UUID

from fastapi import APIRouter, Depends

from blog_api.dependencies import get_user_service
from blog_api.schemas import UserCreate, UserResponse, UserUpdate
from blog_api.services import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])

@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return [UserResponse.model_validate(u) for u in await service.find_all()]

@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    return UserResponse.model_validate(await service.find_by_email(email))

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return UserResponse.model_validate(await service.find(user_id))

@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, service: UserService = Depends(get_user_service)):
    return UserResponse.model_validate(await service.create(data))

@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: UUID, data: UserUpdate, service: UserService = Depends(get_user_service)):
    return UserResponse.model_validate(await service.update(user_id, data))

@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    await service.delete(user_id)
