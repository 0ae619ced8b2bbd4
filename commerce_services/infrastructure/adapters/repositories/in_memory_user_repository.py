from typing import List, Optional

from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.domain.query.predicates import contains_ignore_case
from commerce_services.domain.query.schema import USER_QUERY_SCHEMA
from commerce_services.domain.query.statistics import AggregateReport, summarize
from commerce_services.infrastructure.adapters.repositories.in_memory_collection import InMemoryEntityCollection


class InMemoryUserRepository(InMemoryEntityCollection[User], UserRepository):
    schema = USER_QUERY_SCHEMA
    entity_name = "User"
    unique_fields = ("username", "email")

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self._snapshot() if user.email == email), None)

    async def get_by_username(self, username: str) -> Optional[User]:
        return next((user for user in self._snapshot() if user.username == username), None)

    async def search_by_username(self, username: str) -> List[User]:
        matches = contains_ignore_case("username", username)
        return [user for user in self._snapshot() if matches(user)]

    async def mark_inactive(self, user_id: int) -> User:
        return await self._mark_inactive(user_id)

    async def distinct_roles(self) -> List[str]:
        return sorted({user.role for user in self._snapshot() if user.role is not None})

    async def statistics(self) -> AggregateReport:
        return summarize(self._snapshot(), group_by=("role", "status"))
