from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from commerce_services.applications.interfaces.dtos.order import OrderPublic, OrderSchema
from commerce_services.applications.interfaces.dtos.page import PagedResponse
from commerce_services.applications.services.dto_mapper import OrderDtoMapper, to_paged_response
from commerce_services.applications.use_cases.order.create_order import CreateOrderUseCase
from commerce_services.applications.use_cases.order.delete_order import DeleteOrderUseCase
from commerce_services.applications.use_cases.order.get_order import GetOrderUseCase
from commerce_services.applications.use_cases.order.get_orders import GetOrdersByStatusUseCase, GetOrdersByUserUseCase
from commerce_services.applications.use_cases.order.list_orders_page import ListOrdersPageUseCase
from commerce_services.applications.use_cases.order.update_order import UpdateOrderUseCase
from commerce_services.applications.use_cases.order.update_order_status import UpdateOrderStatusUseCase
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.query.criteria import OrderFilterCriteria, SortDirection
from commerce_services.infrastructure.config.dependencies import get_order_repository

router = APIRouter(prefix="/api/v2/orders", tags=["orders v2"])

OrderRepositoryDep = Annotated[OrderRepository, Depends(get_order_repository)]


@router.post("", status_code=HTTPStatus.CREATED, response_model=OrderPublic)
async def create_order(order: OrderSchema, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await CreateOrderUseCase(order_repository).execute(order))


@router.get("", response_model=PagedResponse[OrderPublic])
async def read_orders(
    order_repository: OrderRepositoryDep,
    page: int = 0,
    size: int = 10,
    sort_by: Annotated[str, Query(alias="sortBy")] = "createdAt",
    sort_dir: Annotated[str, Query(alias="sortDir")] = "desc",
):
    criteria = OrderFilterCriteria(
        page=page, size=size, sort_by=sort_by, sort_direction=SortDirection.parse(sort_dir)
    )
    result = await ListOrdersPageUseCase(order_repository).execute(criteria)
    return to_paged_response(result, OrderDtoMapper.to_public)


@router.get("/user/{user_id}", response_model=List[OrderPublic])
async def read_orders_by_user(user_id: int, order_repository: OrderRepositoryDep):
    orders = await GetOrdersByUserUseCase(order_repository).execute(user_id)
    return [OrderDtoMapper.to_public(order) for order in orders]


@router.get("/status/{status}", response_model=List[OrderPublic])
async def read_orders_by_status(status: str, order_repository: OrderRepositoryDep):
    orders = await GetOrdersByStatusUseCase(order_repository).execute(status)
    return [OrderDtoMapper.to_public(order) for order in orders]


@router.get("/{order_id}", response_model=OrderPublic)
async def read_order(order_id: int, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await GetOrderUseCase(order_repository).execute(order_id))


@router.put("/{order_id}", response_model=OrderPublic)
async def update_order(order_id: int, order: OrderSchema, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await UpdateOrderUseCase(order_repository).execute(order_id, order))


@router.patch("/{order_id}/status", response_model=OrderPublic)
async def update_order_status(order_id: int, status: str, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await UpdateOrderStatusUseCase(order_repository).execute(order_id, status))


@router.delete("/{order_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_order(order_id: int, order_repository: OrderRepositoryDep):
    await DeleteOrderUseCase(order_repository).execute(order_id)
