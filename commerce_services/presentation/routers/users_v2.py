from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from commerce_services.applications.interfaces.dtos.page import PagedResponse
from commerce_services.applications.interfaces.dtos.user import (
    BulkUserRequest,
    GeneratedUsername,
    UserFilterRequest,
    UserPublicV2,
    UserSchemaV2,
    UserStatsResponse,
)
from commerce_services.applications.services.dto_mapper import UserDtoMapper, to_paged_response
from commerce_services.applications.use_cases.user.bulk_create_users import BulkCreateUsersUseCase
from commerce_services.applications.use_cases.user.create_user import CreateUserUseCase
from commerce_services.applications.use_cases.user.deactivate_user import DeactivateUserUseCase
from commerce_services.applications.use_cases.user.generate_username import GenerateUsernameUseCase
from commerce_services.applications.use_cases.user.get_roles import GetRolesUseCase
from commerce_services.applications.use_cases.user.get_user import GetUserUseCase
from commerce_services.applications.use_cases.user.get_user_by_email import GetUserByEmailUseCase
from commerce_services.applications.use_cases.user.get_user_statistics import GetUserStatisticsUseCase
from commerce_services.applications.use_cases.user.search_users import SearchUsersUseCase
from commerce_services.applications.use_cases.user.update_user import UpdateUserUseCase
from commerce_services.applications.use_cases.user.update_user_status import UpdateUserStatusUseCase
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.config.dependencies import get_user_repository

router = APIRouter(prefix="/api/v2/users", tags=["users v2"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


@router.post("/search", response_model=PagedResponse[UserPublicV2])
async def search_users(filter_request: UserFilterRequest, user_repository: UserRepositoryDep):
    page = await SearchUsersUseCase(user_repository).execute(UserDtoMapper.to_criteria(filter_request))
    return to_paged_response(page, UserDtoMapper.to_public_v2)


@router.get("/roles", response_model=List[str])
async def read_roles(user_repository: UserRepositoryDep):
    return await GetRolesUseCase(user_repository).execute()


@router.get("/stats", response_model=UserStatsResponse)
async def read_statistics(user_repository: UserRepositoryDep):
    return await GetUserStatisticsUseCase(user_repository).execute()


@router.post("/generate-username", response_model=GeneratedUsername)
async def generate_username(
    user_repository: UserRepositoryDep,
    first_name: Annotated[str, Query(alias="firstName")],
    last_name: Annotated[str, Query(alias="lastName")],
):
    return await GenerateUsernameUseCase(user_repository).execute(first_name, last_name)


@router.get("/email/{email}", response_model=UserPublicV2)
async def read_user_by_email(email: str, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public_v2(await GetUserByEmailUseCase(user_repository).execute(email))


@router.get("/{user_id}", response_model=UserPublicV2)
async def read_user(user_id: int, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public_v2(await GetUserUseCase(user_repository).execute(user_id))


@router.post("", status_code=HTTPStatus.CREATED, response_model=UserPublicV2)
async def create_user(user: UserSchemaV2, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public_v2(await CreateUserUseCase(user_repository).execute(user))


@router.post("/bulk", status_code=HTTPStatus.CREATED, response_model=List[UserPublicV2])
async def bulk_create_users(bulk_request: BulkUserRequest, user_repository: UserRepositoryDep):
    created = await BulkCreateUsersUseCase(user_repository).execute(bulk_request.users)
    return [UserDtoMapper.to_public_v2(user) for user in created]


@router.put("/{user_id}", response_model=UserPublicV2)
async def update_user(user_id: int, user: UserSchemaV2, user_repository: UserRepositoryDep):
    updated = await UpdateUserUseCase(user_repository).execute(user_id, user, user.version)
    return UserDtoMapper.to_public_v2(updated)


@router.put("/{user_id}/status", response_model=UserPublicV2)
async def update_user_status(user_id: int, status: str, user_repository: UserRepositoryDep):
    return UserDtoMapper.to_public_v2(await UpdateUserStatusUseCase(user_repository).execute(user_id, status))


@router.delete("/{user_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_user(user_id: int, user_repository: UserRepositoryDep):
    await DeactivateUserUseCase(user_repository).execute(user_id)
