from typing import Generic, List, TypeVar

from pydantic import BaseModel, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a filtered, sorted result set.

    Only the requested slice and the pre-pagination count are stored; every
    other piece of metadata is derived from them.
    """

    content: List[T]
    page: int
    size: int
    total_elements: int

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return -(-self.total_elements // self.size)

    @computed_field
    @property
    def first(self) -> bool:
        return self.page == 0

    @computed_field
    @property
    def last(self) -> bool:
        return self.page >= self.total_pages - 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 0
