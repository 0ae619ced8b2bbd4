from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from commerce_services.applications.interfaces.dtos.user import UserPublic, UserSchema
from commerce_services.applications.services.dto_mapper import UserDtoMapper
from commerce_services.applications.use_cases.user.create_user import CreateUserUseCase
from commerce_services.applications.use_cases.user.delete_user import DeleteUserUseCase
from commerce_services.applications.use_cases.user.get_user import GetUserUseCase
from commerce_services.applications.use_cases.user.get_users import GetUsersUseCase
from commerce_services.applications.use_cases.user.update_user import UpdateUserUseCase
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.config.dependencies import get_user_repository

router = APIRouter(prefix="/api/v1/users", tags=["users v1"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


@router.get("", response_model=List[UserPublic])
async def read_users(user_repository: UserRepositoryDep):
    users = await GetUsersUseCase(user_repository).execute()
    return [UserDtoMapper.to_public(user) for user in users]


@router.get("/search", response_model=List[UserPublic])
async def search_users(username: str, user_repository: UserRepositoryDep):
    users = await GetUsersUseCase(user_repository).execute(username=username)
    return [UserDtoMapper.to_public(user) for user in users]


@router.get("/{user_id}", response_model=UserPublic)
async def read_user(user_id: int, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public(await GetUserUseCase(user_repository).execute(user_id))


@router.post("", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public(await CreateUserUseCase(user_repository).execute(user))


@router.put("/{user_id}", response_model=UserPublic)
async def update_user(user_id: int, user: UserSchema, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public(await UpdateUserUseCase(user_repository).execute(user_id, user))


@router.delete("/{user_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_user(user_id: int, user_repository: UserRepositoryDep):
    await DeleteUserUseCase(user_repository).execute(user_id)
