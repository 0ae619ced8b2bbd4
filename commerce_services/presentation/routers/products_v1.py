from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from commerce_services.applications.interfaces.dtos.product import ProductPublic, ProductSchema
from commerce_services.applications.services.dto_mapper import ProductDtoMapper
from commerce_services.applications.use_cases.product.create_product import CreateProductUseCase
from commerce_services.applications.use_cases.product.delete_product import DeleteProductUseCase
from commerce_services.applications.use_cases.product.get_product import GetProductUseCase
from commerce_services.applications.use_cases.product.get_products import GetProductsUseCase
from commerce_services.applications.use_cases.product.update_product import UpdateProductUseCase
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.config.dependencies import get_product_repository

router = APIRouter(prefix="/api/v1/products", tags=["products v1"])

ProductRepositoryDep = Annotated[ProductRepository, Depends(get_product_repository)]


@router.get("", response_model=List[ProductPublic])
async def read_products(product_repository: ProductRepositoryDep):
    products = await GetProductsUseCase(product_repository).execute()
    return [ProductDtoMapper.to_public(product) for product in products]


@router.get("/search", response_model=List[ProductPublic])
async def search_products(name: str, product_repository: ProductRepositoryDep):
    products = await GetProductsUseCase(product_repository).execute(name=name)
    return [ProductDtoMapper.to_public(product) for product in products]


@router.get("/{product_id}", response_model=ProductPublic)
async def read_product(product_id: int, product_repository: ProductRepositoryDep):
    product = await GetProductUseCase(product_repository).execute(product_id)
    return ProductDtoMapper.to_public(product)


@router.post("", status_code=HTTPStatus.CREATED, response_model=ProductPublic)
async def create_product(product: ProductSchema, product_repository: ProductRepositoryDep):
    created = await CreateProductUseCase(product_repository).execute(product)
    return ProductDtoMapper.to_public(created)


@router.put("/{product_id}", response_model=ProductPublic)
async def update_product(product_id: int, product: ProductSchema, product_repository: ProductRepositoryDep):
    updated = await UpdateProductUseCase(product_repository).execute(product_id, product)
    return ProductDtoMapper.to_public(updated)


@router.delete("/{product_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_product(product_id: int, product_repository: ProductRepositoryDep):
    await DeleteProductUseCase(product_repository).execute(product_id)
