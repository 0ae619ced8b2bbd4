from decimal import Decimal

import pytest

from commerce_services.domain.exceptions import InvalidPaginationError, InvalidSortFieldError
from commerce_services.domain.query.criteria import (
    FilterCriteria,
    ProductFilterCriteria,
    SortDirection,
    UserFilterCriteria,
)
from commerce_services.domain.query.engine import QueryEngine, paginate, sort_entities
from commerce_services.domain.query.schema import PRODUCT_QUERY_SCHEMA, USER_QUERY_SCHEMA

from .factories import product_factory, user_factory


@pytest.fixture
def catalog():
    return [
        product_factory.create_domain_product(
            id=1, name="Gaming Laptop", price="1899.99", stock=25, sku="LAP-001", category="Electronics",
            tags=["laptop", "gaming"],
        ),
        product_factory.create_domain_product(
            id=2, name="Office Laptop", price="899.99", stock=0, sku="LAP-002", category="Electronics",
            tags=["laptop", "office"],
        ),
        product_factory.create_domain_product(
            id=3, name="Coffee Mug", price="12.50", stock=5, sku="MUG-001", category="Kitchen", tags=["mug"],
        ),
        product_factory.create_domain_product(
            id=4, name="Retired Laptop", price="499.00", stock=3, sku="LAP-003", category="Electronics",
            tags=["laptop"], active=False,
        ),
        product_factory.create_domain_product(
            id=5, name="Board Game", price="39.90", stock=12, sku="GAM-001", category="Toys", tags=["game"],
        ),
    ]


@pytest.fixture
def engine():
    return QueryEngine(PRODUCT_QUERY_SCHEMA)


class TestProductFiltering:
    """Filtering semantics of the query engine over products"""

    def test_name_fragment_is_case_insensitive(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(name="LAPTOP"), catalog)

        assert [product.id for product in page.content] == [1, 2]
        assert page.total_elements == 2

    def test_conjunction_of_filters(self, engine, catalog):
        # Arrange
        criteria = ProductFilterCriteria(
            category="Electronics", min_price=Decimal("500"), max_price=Decimal("2000"), in_stock=True
        )

        # Act
        page = engine.query(criteria, catalog)

        # Assert
        assert [product.name for product in page.content] == ["Gaming Laptop"]

    def test_every_result_satisfies_every_filter(self, engine, catalog):
        criteria = ProductFilterCriteria(category="Electronics", max_price=Decimal("1000"), size=100)

        page = engine.query(criteria, catalog)

        for product in page.content:
            assert product.active
            assert product.category == "Electronics"
            assert product.price <= Decimal("1000")

    def test_price_bounds_are_inclusive(self, engine, catalog):
        criteria = ProductFilterCriteria(min_price=Decimal("12.50"), max_price=Decimal("39.90"))

        page = engine.query(criteria, catalog)

        assert {product.id for product in page.content} == {3, 5}

    def test_out_of_stock_filter(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(in_stock=False), catalog)

        assert [product.id for product in page.content] == [2]

    def test_tag_is_an_exact_token(self, engine, catalog):
        """A tag filter of "game" must not match a product tagged "gaming"."""
        page = engine.query(ProductFilterCriteria(tag="game"), catalog)

        assert [product.id for product in page.content] == [5]

    def test_blank_filters_are_ignored(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(name="   ", category="", tag=None, size=100), catalog)

        assert page.total_elements == 4

    def test_inactive_products_are_hidden_by_default(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(name="Retired"), catalog)

        assert page.content == []
        assert page.total_elements == 0

    def test_inactive_products_visible_when_requested(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(name="Retired", active_only=False), catalog)

        assert [product.id for product in page.content] == [4]

    def test_query_does_not_mutate_input(self, engine, catalog):
        before = [product.model_copy(deep=True) for product in catalog]

        engine.query(ProductFilterCriteria(sort_by="price", sort_direction=SortDirection.DESC), catalog)

        assert catalog == before


class TestSortingAndPagination:
    def test_sort_by_price_descending(self, engine, catalog):
        criteria = ProductFilterCriteria(sort_by="price", sort_direction=SortDirection.DESC)

        page = engine.query(criteria, catalog)

        assert [product.id for product in page.content] == [1, 2, 5, 3]

    def test_ties_keep_input_order_in_both_directions(self, engine, catalog):
        ascending = engine.query(ProductFilterCriteria(sort_by="category"), catalog)
        descending = engine.query(
            ProductFilterCriteria(sort_by="category", sort_direction=SortDirection.DESC), catalog
        )

        assert [product.id for product in ascending.content] == [1, 2, 3, 5]
        assert [product.id for product in descending.content] == [5, 3, 1, 2]

    def test_missing_values_sort_last_when_ascending(self, engine):
        products = [
            product_factory.create_domain_product(id=1, sku="A-0001", category=None),
            product_factory.create_domain_product(id=2, sku="A-0002", category="Books"),
        ]

        page = engine.query(ProductFilterCriteria(sort_by="category"), products)

        assert [product.id for product in page.content] == [2, 1]

    def test_public_sort_name_maps_to_attribute(self):
        engine = QueryEngine(USER_QUERY_SCHEMA)
        users = [
            user_factory.create_domain_user(id=1, username="zed", email="z@example.com", first_name="Zed"),
            user_factory.create_domain_user(id=2, username="amy", email="a@example.com", first_name="Amy"),
        ]

        page = engine.query(UserFilterCriteria(sort_by="firstName", sort_direction=SortDirection.ASC), users)

        assert [user.username for user in page.content] == ["amy", "zed"]

    def test_pages_partition_the_filtered_set(self, engine, catalog):
        # Arrange
        sizes = [1, 2, 3]

        for size in sizes:
            # Act
            first = engine.query(ProductFilterCriteria(size=size), catalog)
            pages = [
                engine.query(ProductFilterCriteria(size=size, page=number), catalog)
                for number in range(first.total_pages)
            ]

            # Assert
            ids = [product.id for page in pages for product in page.content]
            assert len(ids) == len(set(ids)) == first.total_elements == 4
            assert pages[-1].last
            assert not pages[-1].has_next

    def test_same_query_is_idempotent(self, engine, catalog):
        criteria = ProductFilterCriteria(category="Electronics", sort_by="price", page=0, size=1)

        assert engine.query(criteria, catalog) == engine.query(criteria, catalog)

    def test_page_beyond_the_end_is_empty(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(page=5, size=10), catalog)

        assert page.content == []
        assert page.total_elements == 4
        assert page.total_pages == 1
        assert page.last
        assert not page.has_next
        assert page.has_previous

    def test_page_metadata(self, engine, catalog):
        page = engine.query(ProductFilterCriteria(page=1, size=2), catalog)

        assert page.total_pages == 2
        assert not page.first
        assert page.last
        assert page.has_previous
        assert not page.has_next

    def test_empty_result_metadata(self, engine):
        page = engine.query(ProductFilterCriteria(), [])

        assert page.total_pages == 0
        assert page.first
        assert page.last
        assert not page.has_next


class TestCriteriaValidation:
    def test_unknown_sort_field_is_rejected(self, engine, catalog):
        with pytest.raises(InvalidSortFieldError) as exc_info:
            engine.query(ProductFilterCriteria(sort_by="password"), catalog)

        assert "sortBy" in exc_info.value.errors

    def test_negative_page_is_rejected(self, engine, catalog):
        with pytest.raises(InvalidPaginationError) as exc_info:
            engine.query(ProductFilterCriteria(page=-1), catalog)

        assert "page" in exc_info.value.errors

    def test_zero_size_is_rejected(self, engine, catalog):
        with pytest.raises(InvalidPaginationError) as exc_info:
            engine.query(ProductFilterCriteria(size=0), catalog)

        assert "size" in exc_info.value.errors


class TestHelpers:
    def test_engine_accepts_mappings(self):
        engine = QueryEngine(PRODUCT_QUERY_SCHEMA)
        rows = [
            {"id": 1, "name": "Desk", "price": Decimal("150"), "active": True, "tags": []},
            {"id": 2, "name": "Desk Lamp", "price": Decimal("25"), "active": True, "tags": ["lamp"]},
        ]

        page = engine.query(ProductFilterCriteria(name="desk", sort_by="price"), rows)

        assert [row["id"] for row in page.content] == [2, 1]

    def test_sort_entities_descending_is_stable(self):
        rows = [{"id": 1, "rank": 1}, {"id": 2, "rank": 2}, {"id": 3, "rank": 1}]

        ordered = sort_entities(rows, "rank", SortDirection.DESC)

        assert [row["id"] for row in ordered] == [2, 1, 3]

    def test_paginate_slices(self):
        page = paginate(list(range(7)), page=1, size=3)

        assert page.content == [3, 4, 5]
        assert page.total_elements == 7
        assert page.total_pages == 3

    def test_direction_parse_defaults_to_ascending(self):
        assert SortDirection.parse("DESC") == SortDirection.DESC
        assert SortDirection.parse("sideways") == SortDirection.ASC
        assert SortDirection.parse(None) == SortDirection.ASC

    def test_base_criteria_defaults(self):
        criteria = FilterCriteria()

        assert criteria.active_only
        assert criteria.page == 0
        assert criteria.size == 10


class TestWorkedExamples:
    @pytest.fixture
    def gadgets(self):
        return [
            {"id": 1, "name": "Widget", "price": Decimal("50"), "active": True, "tags": []},
            {"id": 2, "name": "Gadget", "price": Decimal("150"), "active": True, "tags": []},
            {"id": 3, "name": "Old", "price": Decimal("10"), "active": False, "tags": []},
        ]

    def test_min_price_sorted_by_price(self, engine, gadgets):
        criteria = ProductFilterCriteria(
            min_price=Decimal("20"), active_only=True, sort_by="price", sort_direction=SortDirection.ASC, size=10
        )

        page = engine.query(criteria, gadgets)

        assert [row["name"] for row in page.content] == ["Widget", "Gadget"]
        assert page.total_elements == 2
        assert page.total_pages == 1
        assert page.first
        assert page.last

    def test_page_past_the_end(self, engine, gadgets):
        active = engine.query(ProductFilterCriteria(page=5, size=10), gadgets)
        everything = engine.query(ProductFilterCriteria(page=5, size=10, active_only=False), gadgets)

        assert active.content == []
        assert active.total_elements == 2
        assert active.last
        assert everything.total_elements == 3
