from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from commerce_services.applications.interfaces.dtos.page import PagedResponse
from commerce_services.applications.interfaces.dtos.product import (
    BulkProductRequest,
    GeneratedSku,
    ProductFilterRequest,
    ProductPublicV2,
    ProductSchemaV2,
    ProductStatsResponse,
)
from commerce_services.applications.services.dto_mapper import ProductDtoMapper, to_paged_response
from commerce_services.applications.use_cases.product.bulk_create_products import BulkCreateProductsUseCase
from commerce_services.applications.use_cases.product.create_product import CreateProductUseCase
from commerce_services.applications.use_cases.product.deactivate_product import DeactivateProductUseCase
from commerce_services.applications.use_cases.product.generate_sku import GenerateSkuUseCase
from commerce_services.applications.use_cases.product.get_categories import GetCategoriesUseCase
from commerce_services.applications.use_cases.product.get_product import GetProductUseCase
from commerce_services.applications.use_cases.product.get_product_by_sku import GetProductBySkuUseCase
from commerce_services.applications.use_cases.product.get_product_statistics import GetProductStatisticsUseCase
from commerce_services.applications.use_cases.product.search_products import SearchProductsUseCase
from commerce_services.applications.use_cases.product.update_product import UpdateProductUseCase
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.config.dependencies import get_product_repository

router = APIRouter(prefix="/api/v2/products", tags=["products v2"])

ProductRepositoryDep = Annotated[ProductRepository, Depends(get_product_repository)]


@router.post("/search", response_model=PagedResponse[ProductPublicV2])
async def search_products(filter_request: ProductFilterRequest, product_repository: ProductRepositoryDep):
    criteria = ProductDtoMapper.to_criteria(filter_request)
    page = await SearchProductsUseCase(product_repository).execute(criteria)
    return to_paged_response(page, ProductDtoMapper.to_public_v2)


@router.get("/categories", response_model=List[str])
async def read_categories(product_repository: ProductRepositoryDep):
    return await GetCategoriesUseCase(product_repository).execute()


@router.get("/stats", response_model=ProductStatsResponse)
async def read_statistics(product_repository: ProductRepositoryDep):
    return await GetProductStatisticsUseCase(product_repository).execute()


@router.get("/generate-sku", response_model=GeneratedSku)
async def generate_sku(product_repository: ProductRepositoryDep):
    return await GenerateSkuUseCase(product_repository).execute()


@router.get("/sku/{sku}", response_model=ProductPublicV2)
async def read_product_by_sku(sku: str, product_repository: ProductRepositoryDep):
    product = await GetProductBySkuUseCase(product_repository).execute(sku)
    return ProductDtoMapper.to_public_v2(product)


@router.get("/{product_id}", response_model=ProductPublicV2)
async def read_product(product_id: int, product_repository: ProductRepositoryDep):
    product = await GetProductUseCase(product_repository).execute(product_id)
    return ProductDtoMapper.to_public_v2(product)


@router.post("", status_code=HTTPStatus.CREATED, response_model=ProductPublicV2)
async def create_product(product: ProductSchemaV2, product_repository: ProductRepositoryDep):
    created = await CreateProductUseCase(product_repository).execute(product)
    return ProductDtoMapper.to_public_v2(created)


@router.post("/bulk", status_code=HTTPStatus.CREATED, response_model=List[ProductPublicV2])
async def bulk_create_products(bulk_request: BulkProductRequest, product_repository: ProductRepositoryDep):
    created = await BulkCreateProductsUseCase(product_repository).execute(bulk_request.products)
    return [ProductDtoMapper.to_public_v2(product) for product in created]


@router.put("/{product_id}", response_model=ProductPublicV2)
async def update_product(product_id: int, product: ProductSchemaV2, product_repository: ProductRepositoryDep):
    updated = await UpdateProductUseCase(product_repository).execute(product_id, product, product.version)
    return ProductDtoMapper.to_public_v2(updated)


@router.delete("/{product_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_product(product_id: int, product_repository: ProductRepositoryDep):
    await DeactivateProductUseCase(product_repository).execute(product_id)
