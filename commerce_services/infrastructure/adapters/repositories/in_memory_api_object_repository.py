from typing import List

from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository
from commerce_services.domain.query.predicates import contains_ignore_case
from commerce_services.domain.query.schema import API_OBJECT_QUERY_SCHEMA
from commerce_services.infrastructure.adapters.repositories.in_memory_collection import InMemoryEntityCollection


class InMemoryApiObjectRepository(InMemoryEntityCollection[ApiObject], ApiObjectRepository):
    schema = API_OBJECT_QUERY_SCHEMA
    entity_name = "ApiObject"

    async def search_by_name(self, name: str) -> List[ApiObject]:
        matches = contains_ignore_case("name", name)
        return [api_object for api_object in self._snapshot() if matches(api_object)]
