from abc import abstractmethod
from typing import List, Optional

from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection
from commerce_services.domain.query.statistics import AggregateReport


class UserRepository(EntityCollection[User]):
    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def search_by_username(self, username: str) -> List[User]:
        pass

    @abstractmethod
    async def mark_inactive(self, user_id: int) -> User:
        pass

    @abstractmethod
    async def distinct_roles(self) -> List[str]:
        pass

    @abstractmethod
    async def statistics(self) -> AggregateReport:
        pass
