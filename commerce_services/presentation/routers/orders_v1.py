from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from commerce_services.applications.interfaces.dtos.order import OrderPublic, OrderSchema
from commerce_services.applications.services.dto_mapper import OrderDtoMapper
from commerce_services.applications.use_cases.order.create_order import CreateOrderUseCase
from commerce_services.applications.use_cases.order.delete_order import DeleteOrderUseCase
from commerce_services.applications.use_cases.order.get_order import GetOrderUseCase
from commerce_services.applications.use_cases.order.get_orders import GetOrdersUseCase
from commerce_services.applications.use_cases.order.update_order import UpdateOrderUseCase
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.infrastructure.config.dependencies import get_order_repository

router = APIRouter(prefix="/api/v1/orders", tags=["orders v1"])

OrderRepositoryDep = Annotated[OrderRepository, Depends(get_order_repository)]


@router.post("", status_code=HTTPStatus.CREATED, response_model=OrderPublic)
async def create_order(order: OrderSchema, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await CreateOrderUseCase(order_repository).execute(order))


@router.get("/{order_id}", response_model=OrderPublic)
async def read_order(order_id: int, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await GetOrderUseCase(order_repository).execute(order_id))


@router.get("", response_model=List[OrderPublic])
async def read_orders(order_repository: OrderRepositoryDep):
    orders = await GetOrdersUseCase(order_repository).execute()
    return [OrderDtoMapper.to_public(order) for order in orders]


@router.put("/{order_id}", response_model=OrderPublic)
async def update_order(order_id: int, order: OrderSchema, order_repository: OrderRepositoryDep):
    return OrderDtoMapper.to_public(await UpdateOrderUseCase(order_repository).execute(order_id, order))


@router.delete("/{order_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_order(order_id: int, order_repository: OrderRepositoryDep):
    await DeleteOrderUseCase(order_repository).execute(order_id)
