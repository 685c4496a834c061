from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError

from app.dependencies import get_user_service
from app.models import User
from app.schemas import ErrorResponse, UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])

_NOT_FOUND = {404: {"model": ErrorResponse}}

# The users table declares no unique or check constraints; the 409 mapping
# covers constraints added by another store or a later migration.
_CONFLICT_DETAIL = "User violates a database constraint"


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.get_all_users()


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return await service.get_user_by_id(user_id)


@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, service: UserService = Depends(get_user_service)):
    try:
        return await service.create_user(User(name=data.name, email=data.email))
    except IntegrityError:
        raise HTTPException(status_code=409, detail=_CONFLICT_DETAIL)


@router.put("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def update_user(
    user_id: int,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    try:
        return await service.update_user(user_id, User(name=data.name, email=data.email))
    except IntegrityError:
        raise HTTPException(status_code=409, detail=_CONFLICT_DETAIL)


@router.delete("/{user_id}", status_code=204, responses=_NOT_FOUND)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    await service.delete_user(user_id)
    return Response(status_code=204)
