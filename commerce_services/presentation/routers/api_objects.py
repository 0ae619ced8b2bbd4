from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from commerce_services.applications.interfaces.dtos.api_object import ApiObjectPublic, ApiObjectSchema
from commerce_services.applications.services.dto_mapper import ApiObjectDtoMapper
from commerce_services.applications.use_cases.api_object.create_api_object import CreateApiObjectUseCase
from commerce_services.applications.use_cases.api_object.delete_api_object import DeleteApiObjectUseCase
from commerce_services.applications.use_cases.api_object.get_api_object import GetApiObjectUseCase
from commerce_services.applications.use_cases.api_object.get_api_objects import GetApiObjectsUseCase
from commerce_services.applications.use_cases.api_object.update_api_object import UpdateApiObjectUseCase
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository
from commerce_services.infrastructure.config.dependencies import get_api_object_repository

router = APIRouter(prefix="/api/objects", tags=["api objects"])

ApiObjectRepositoryDep = Annotated[ApiObjectRepository, Depends(get_api_object_repository)]


@router.get("", response_model=List[ApiObjectPublic])
async def read_objects(api_object_repository: ApiObjectRepositoryDep):
    objects = await GetApiObjectsUseCase(api_object_repository).execute()
    return [ApiObjectDtoMapper.to_public(api_object) for api_object in objects]


@router.get("/search", response_model=List[ApiObjectPublic])
async def search_objects(name: str, api_object_repository: ApiObjectRepositoryDep):
    objects = await GetApiObjectsUseCase(api_object_repository).execute(name=name)
    return [ApiObjectDtoMapper.to_public(api_object) for api_object in objects]


@router.get("/{object_id}", response_model=ApiObjectPublic)
async def read_object(object_id: int, api_object_repository: ApiObjectRepositoryDep):
    return ApiObjectDtoMapper.to_public(await GetApiObjectUseCase(api_object_repository).execute(object_id))


@router.post("", status_code=HTTPStatus.CREATED, response_model=ApiObjectPublic)
async def create_object(api_object: ApiObjectSchema, api_object_repository: ApiObjectRepositoryDep):
    return ApiObjectDtoMapper.to_public(await CreateApiObjectUseCase(api_object_repository).execute(api_object))


@router.put("/{object_id}", response_model=ApiObjectPublic)
async def update_object(object_id: int, api_object: ApiObjectSchema, api_object_repository: ApiObjectRepositoryDep):
    updated = await UpdateApiObjectUseCase(api_object_repository).execute(object_id, api_object)
    return ApiObjectDtoMapper.to_public(updated)


@router.delete("/{object_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_object(object_id: int, api_object_repository: ApiObjectRepositoryDep):
    await DeleteApiObjectUseCase(api_object_repository).execute(object_id)
