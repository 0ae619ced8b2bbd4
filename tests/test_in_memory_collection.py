import asyncio
from decimal import Decimal

import pytest

from commerce_services.domain.exceptions import ConflictError, NotFoundError
from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.query.criteria import ProductFilterCriteria, SortDirection, UserFilterCriteria
from commerce_services.infrastructure.adapters.repositories.in_memory_api_object_repository import (
    InMemoryApiObjectRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_product_repository import (
    InMemoryProductRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)

from .factories import order_factory, product_factory, user_factory


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


class TestInMemoryProductRepository:
    """Tests for the dictionary-backed product collection"""

    @pytest.mark.asyncio
    async def test_insert_assigns_identity_and_version(self, product_repository):
        # Act
        created = await product_repository.insert(product_factory.create_domain_product())

        # Assert
        assert created.id == 1
        assert created.version == 0
        assert created.created_at is not None
        assert created.updated_at == created.created_at

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, product_repository):
        with pytest.raises(NotFoundError, match="Product not found with id: 42"):
            await product_repository.get(42)

    @pytest.mark.asyncio
    async def test_returned_entities_are_copies(self, product_repository):
        created = await product_repository.insert(product_factory.create_domain_product())

        created.tags.append("mutated")
        fetched = await product_repository.get(created.id)

        assert "mutated" not in fetched.tags

    @pytest.mark.asyncio
    async def test_duplicate_sku_is_a_conflict(self, product_repository):
        await product_repository.insert(product_factory.create_domain_product(sku="DUP-00001"))

        with pytest.raises(ConflictError):
            await product_repository.insert(product_factory.create_domain_product(sku="DUP-00001"))

    @pytest.mark.asyncio
    async def test_update_with_matching_version_bumps_version(self, product_repository):
        # Arrange
        created = await product_repository.insert(product_factory.create_domain_product())
        new_state = created.model_copy(update={"price": Decimal("10.00")})

        # Act
        updated = await product_repository.update_if_version_matches(created.id, new_state, 0)

        # Assert
        assert updated.version == 1
        assert updated.price == Decimal("10.00")
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_with_stale_version_is_a_conflict(self, product_repository):
        created = await product_repository.insert(product_factory.create_domain_product())
        await product_repository.update_if_version_matches(created.id, created, 0)

        with pytest.raises(ConflictError):
            await product_repository.update_if_version_matches(created.id, created, 0)

        assert (await product_repository.get(created.id)).version == 1

    @pytest.mark.asyncio
    async def test_update_missing_entity_is_not_found(self, product_repository):
        with pytest.raises(NotFoundError):
            await product_repository.update_if_version_matches(9, product_factory.create_domain_product(), 0)

    @pytest.mark.asyncio
    async def test_concurrent_writers_with_same_version(self, product_repository):
        """Exactly one of two writers holding the same version wins"""
        # Arrange
        created = await product_repository.insert(product_factory.create_domain_product(stock=10))
        first = created.model_copy(update={"stock": 1})
        second = created.model_copy(update={"stock": 2})

        # Act
        results = await asyncio.gather(
            product_repository.update_if_version_matches(created.id, first, 0),
            product_repository.update_if_version_matches(created.id, second, 0),
            return_exceptions=True,
        )

        # Assert
        conflicts = [result for result in results if isinstance(result, ConflictError)]
        winners = [result for result in results if not isinstance(result, Exception)]
        assert len(conflicts) == 1
        assert len(winners) == 1
        stored = await product_repository.get(created.id)
        assert stored.version == 1
        assert stored.stock == winners[0].stock

    @pytest.mark.asyncio
    async def test_insert_all_is_all_or_nothing(self, product_repository):
        await product_repository.insert(product_factory.create_domain_product(sku="TAKEN-001"))
        batch = [
            product_factory.create_domain_product(sku="FRESH-001"),
            product_factory.create_domain_product(sku="TAKEN-001"),
        ]

        with pytest.raises(ConflictError):
            await product_repository.insert_all(batch)

        assert len(await product_repository.scan()) == 1
        assert await product_repository.get_by_sku("FRESH-001") is None

    @pytest.mark.asyncio
    async def test_insert_all_rejects_duplicates_within_batch(self, product_repository):
        batch = [
            product_factory.create_domain_product(sku="SAME-0001"),
            product_factory.create_domain_product(sku="SAME-0001"),
        ]

        with pytest.raises(ConflictError):
            await product_repository.insert_all(batch)

        assert await product_repository.scan() == []

    @pytest.mark.asyncio
    async def test_mark_inactive_hides_from_default_query(self, product_repository):
        # Arrange
        created = await product_repository.insert(product_factory.create_domain_product())

        # Act
        deactivated = await product_repository.mark_inactive(created.id)

        # Assert
        assert not deactivated.active
        assert deactivated.version == 1
        assert (await product_repository.query(ProductFilterCriteria())).total_elements == 0
        assert (await product_repository.query(ProductFilterCriteria(active_only=False))).total_elements == 1

    @pytest.mark.asyncio
    async def test_delete_removes_entity(self, product_repository):
        created = await product_repository.insert(product_factory.create_domain_product())

        await product_repository.delete(created.id)

        with pytest.raises(NotFoundError):
            await product_repository.get(created.id)
        with pytest.raises(NotFoundError):
            await product_repository.delete(created.id)

    @pytest.mark.asyncio
    async def test_search_categories_and_statistics(self, product_repository):
        # Arrange
        await product_repository.insert_all(
            [
                product_factory.create_domain_product(name="Gaming Laptop", sku="P-00001", category="Electronics"),
                product_factory.create_domain_product(name="Chef Knife", sku="P-00002", category="Kitchen", stock=0),
                product_factory.create_domain_product(name="Old Laptop", sku="P-00003", category="Legacy"),
            ]
        )
        await product_repository.mark_inactive(3)

        # Act
        found = await product_repository.search_by_name("laptop")
        categories = await product_repository.distinct_categories()
        report = await product_repository.statistics()

        # Assert
        assert [product.sku for product in found] == ["P-00001", "P-00003"]
        assert categories == ["Electronics", "Kitchen"]
        assert report.total_count == 3
        assert report.active_count == 2
        assert report.group("category") == {"Electronics": 1, "Kitchen": 1}
        assert report.out_count == 1

    @pytest.mark.asyncio
    async def test_query_uses_snapshot(self, product_repository):
        await product_repository.insert(product_factory.create_domain_product(sku="Q-00001", price="5.00"))
        await product_repository.insert(product_factory.create_domain_product(sku="Q-00002", price="15.00"))

        page = await product_repository.query(
            ProductFilterCriteria(sort_by="price", sort_direction=SortDirection.DESC)
        )

        assert [product.sku for product in page.content] == ["Q-00002", "Q-00001"]


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_username_and_email_are_unique(self, user_repository):
        await user_repository.insert(user_factory.create_domain_user())

        with pytest.raises(ConflictError):
            await user_repository.insert(user_factory.create_domain_user(email="other@example.com"))
        with pytest.raises(ConflictError):
            await user_repository.insert(user_factory.create_domain_user(username="other"))

    @pytest.mark.asyncio
    async def test_update_may_keep_own_unique_values(self, user_repository):
        created = await user_repository.insert(user_factory.create_domain_user())

        updated = await user_repository.update_if_version_matches(
            created.id, created.model_copy(update={"first_name": "Johnny"}), created.version
        )

        assert updated.first_name == "Johnny"
        assert updated.username == created.username

    @pytest.mark.asyncio
    async def test_lookups_roles_and_statistics(self, user_repository):
        # Arrange
        await user_repository.insert(user_factory.create_domain_user(username="ana", email="ana@example.com"))
        await user_repository.insert(
            user_factory.create_domain_user(username="bob", email="bob@example.com", role="ADMIN")
        )
        await user_repository.mark_inactive(2)

        # Act
        report = await user_repository.statistics()

        # Assert
        assert (await user_repository.get_by_email("bob@example.com")).username == "bob"
        assert (await user_repository.get_by_username("ana")).email == "ana@example.com"
        assert await user_repository.get_by_username("nobody") is None
        assert [user.username for user in await user_repository.search_by_username("AN")] == ["ana"]
        assert await user_repository.distinct_roles() == ["ADMIN", "USER"]
        assert report.total_count == 2
        assert report.inactive_count == 1
        assert report.group("role") == {"USER": 1}

    @pytest.mark.asyncio
    async def test_query_filters_by_role(self, user_repository):
        await user_repository.insert(user_factory.create_domain_user(username="ana", email="ana@example.com"))
        await user_repository.insert(
            user_factory.create_domain_user(username="bob", email="bob@example.com", role="ADMIN")
        )

        page = await user_repository.query(UserFilterCriteria(role="ADMIN"))

        assert [user.username for user in page.content] == ["bob"]


class TestInMemoryOrderAndObjectRepositories:
    @pytest.mark.asyncio
    async def test_orders_by_user_and_status(self):
        repository = InMemoryOrderRepository()
        await repository.insert(order_factory.create_domain_order(user_id=1))
        await repository.insert(order_factory.create_domain_order(user_id=2, status="SHIPPED"))

        assert [order.user_id for order in await repository.get_by_user_id(2)] == [2]
        assert [order.id for order in await repository.get_by_status("PENDING")] == [1]

    @pytest.mark.asyncio
    async def test_object_name_search_is_case_insensitive(self):
        repository = InMemoryApiObjectRepository()
        await repository.insert(ApiObject(name="Apple MacBook", data={"year": 2019}))
        await repository.insert(ApiObject(name="Google Pixel", data=None))

        found = await repository.search_by_name("macbook")

        assert [api_object.name for api_object in found] == ["Apple MacBook"]
        assert found[0].data == {"year": 2019}
