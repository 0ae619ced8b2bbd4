from typing import Callable, TypeVar

from commerce_services.applications.interfaces.dtos.api_object import ApiObjectPublic, ApiObjectSchema
from commerce_services.applications.interfaces.dtos.order import OrderPublic, OrderSchema
from commerce_services.applications.interfaces.dtos.page import PagedResponse
from commerce_services.applications.interfaces.dtos.product import (
    ProductFilterRequest,
    ProductPublic,
    ProductPublicV2,
    ProductSchema,
    ProductSchemaV2,
    ProductStatsResponse,
)
from commerce_services.applications.interfaces.dtos.user import (
    UserFilterRequest,
    UserPublic,
    UserPublicV2,
    UserSchema,
    UserSchemaV2,
    UserStatsResponse,
)
from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.models.order import Order
from commerce_services.domain.models.page import Page
from commerce_services.domain.models.product import Product
from commerce_services.domain.models.user import User
from commerce_services.domain.query.criteria import ProductFilterCriteria, SortDirection, UserFilterCriteria
from commerce_services.domain.query.statistics import AggregateReport

T = TypeVar("T")
U = TypeVar("U")

DEFAULTED_USER_FIELDS = {"role", "status", "active"}


def to_paged_response(page: Page[T], convert: Callable[[T], U]) -> PagedResponse[U]:
    return PagedResponse(
        content=[convert(item) for item in page.content],
        page_number=page.page,
        page_size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        first=page.first,
        last=page.last,
        has_next=page.has_next,
        has_previous=page.has_previous,
    )


class ProductDtoMapper:
    """Maps product DTOs to and from the domain model"""

    @staticmethod
    def to_public(product: Product) -> ProductPublic:
        return ProductPublic.model_validate(product)

    @staticmethod
    def to_public_v2(product: Product) -> ProductPublicV2:
        return ProductPublicV2.model_validate(product)

    @staticmethod
    def to_domain(product_data: ProductSchema) -> Product:
        """Convert a v1 or v2 request to a new, unsaved product"""
        fields = product_data.model_dump(exclude={"version"})
        return Product(**fields)

    @staticmethod
    def apply(existing: Product, product_data: ProductSchema) -> Product:
        """Overlay request fields on an existing product, keeping identity and fields v1 does not send"""
        return Product(**{**existing.model_dump(), **product_data.model_dump(exclude={"version"})})

    @staticmethod
    def to_criteria(filter_request: ProductFilterRequest) -> ProductFilterCriteria:
        return ProductFilterCriteria(
            name=filter_request.name,
            category=filter_request.category,
            min_price=filter_request.min_price,
            max_price=filter_request.max_price,
            tag=filter_request.tag,
            in_stock=filter_request.in_stock,
            active_only=filter_request.active_only,
            page=filter_request.page,
            size=filter_request.size,
            sort_by=filter_request.sort_by,
            sort_direction=SortDirection.parse(filter_request.sort_direction),
        )

    @staticmethod
    def to_stats_response(report: AggregateReport) -> ProductStatsResponse:
        return ProductStatsResponse(
            total_products=report.total_count,
            active_products=report.active_count,
            inactive_products=report.inactive_count,
            total_categories=report.distinct("category"),
            products_by_category=report.group("category"),
            average_price=report.numeric.average,
            max_price=report.numeric.maximum,
            min_price=report.numeric.minimum,
            total_stock=report.total_quantity,
            out_of_stock_count=report.out_count,
            low_stock_count=report.low_count,
        )


class UserDtoMapper:
    """Maps user DTOs to and from the domain model"""

    @staticmethod
    def to_public(user: User) -> UserPublic:
        return UserPublic.model_validate(user)

    @staticmethod
    def to_public_v2(user: User) -> UserPublicV2:
        return UserPublicV2.model_validate(user)

    @staticmethod
    def to_domain(user_data: UserSchema) -> User:
        """Unset role, status and active fall back to USER, ACTIVE and true"""
        fields = user_data.model_dump(exclude={"version"}, exclude_none=True)
        return User(**fields)

    @staticmethod
    def apply(existing: User, user_data: UserSchema) -> User:
        """A null phone clears it; a null role, status or active keeps the stored value"""
        fields = user_data.model_dump(exclude={"version"})
        update = {key: value for key, value in fields.items() if value is not None or key not in DEFAULTED_USER_FIELDS}
        return existing.model_copy(update=update)

    @staticmethod
    def to_criteria(filter_request: UserFilterRequest) -> UserFilterCriteria:
        return UserFilterCriteria(
            username=filter_request.username,
            email=filter_request.email,
            first_name=filter_request.first_name,
            last_name=filter_request.last_name,
            role=filter_request.role,
            status=filter_request.status,
            active_only=filter_request.active_only,
            page=filter_request.page,
            size=filter_request.size,
            sort_by=filter_request.sort_by,
            sort_direction=SortDirection.parse(filter_request.sort_direction),
        )

    @staticmethod
    def to_stats_response(report: AggregateReport) -> UserStatsResponse:
        return UserStatsResponse(
            total_users=report.total_count,
            active_users=report.active_count,
            inactive_users=report.inactive_count,
            users_by_role=report.group("role"),
            users_by_status=report.group("status"),
        )


class OrderDtoMapper:
    @staticmethod
    def to_public(order: Order) -> OrderPublic:
        return OrderPublic.model_validate(order)

    @staticmethod
    def to_domain(order_data: OrderSchema) -> Order:
        return Order(**order_data.model_dump())

    @staticmethod
    def apply(existing: Order, order_data: OrderSchema) -> Order:
        return existing.model_copy(update=order_data.model_dump())


class ApiObjectDtoMapper:
    @staticmethod
    def to_public(api_object: ApiObject) -> ApiObjectPublic:
        return ApiObjectPublic.model_validate(api_object)

    @staticmethod
    def to_domain(object_data: ApiObjectSchema) -> ApiObject:
        return ApiObject(name=object_data.name, data=object_data.data)

    @staticmethod
    def apply(existing: ApiObject, object_data: ApiObjectSchema) -> ApiObject:
        return existing.model_copy(update={"name": object_data.name, "data": object_data.data})
