from typing import Generic, List, TypeVar

from commerce_services.applications.interfaces.dtos.base import CamelModel

T = TypeVar("T")


class PagedResponse(CamelModel, Generic[T]):
    content: List[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    has_next: bool
    has_previous: bool
