import pytest
from fastapi import status

from .conftest import BaseIntegrationTest
from .factories import user_factory


class TestUserV1Api(BaseIntegrationTest):
    """Integration tests for the v1 user endpoints"""

    @pytest.mark.asyncio
    async def test_create_user_success(self, client):
        """Test successful user creation via API"""
        # Act
        response = await client.post("/api/v1/users", json=user_factory.create_user_data())

        # Assert
        assert response.status_code == status.HTTP_201_CREATED
        user = response.json()
        assert user["username"] == "jdoe"
        assert user["firstName"] == "John"
        assert "role" not in user

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, client):
        response = await client.post("/api/v1/users", json=user_factory.create_user_data(email="not-an-email"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "email" in response.json()["validationErrors"]

    @pytest.mark.asyncio
    async def test_duplicate_username_returns_409(self, client):
        await client.post("/api/v1/users", json=user_factory.create_user_data())

        response = await client.post("/api/v1/users", json=user_factory.create_user_data(email="new@example.com"))

        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_update_search_and_delete(self, client):
        created = (await client.post("/api/v1/users", json=user_factory.create_user_data())).json()

        updated = await client.put(
            f"/api/v1/users/{created['id']}", json=user_factory.create_user_data(lastName="Dough")
        )
        searched = await client.get("/api/v1/users/search", params={"username": "DO"})
        deleted = await client.delete(f"/api/v1/users/{created['id']}")
        missing = await client.get(f"/api/v1/users/{created['id']}")

        assert updated.json()["lastName"] == "Dough"
        assert [user["id"] for user in searched.json()] == [created["id"]]
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert missing.status_code == status.HTTP_404_NOT_FOUND


class TestUserV2Api(BaseIntegrationTest):
    """Integration tests for the v2 user endpoints"""

    async def create(self, client, **overrides):
        response = await client.post("/api/v2/users", json=user_factory.create_user_data(**overrides))
        assert response.status_code == status.HTTP_201_CREATED
        return response.json()

    @pytest.mark.asyncio
    async def test_create_defaults(self, client):
        created = await self.create(client)

        assert created["role"] == "USER"
        assert created["status"] == "ACTIVE"
        assert created["active"] is True
        assert created["version"] == 0

    @pytest.mark.asyncio
    async def test_invalid_role(self, client):
        response = await client.post("/api/v2/users", json=user_factory.create_user_data(role="ROOT"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "role" in response.json()["validationErrors"]

    @pytest.mark.asyncio
    async def test_read_by_email(self, client):
        await self.create(client)

        found = await client.get("/api/v2/users/email/jdoe@example.com")
        missing = await client.get("/api/v2/users/email/ghost@example.com")

        assert found.json()["username"] == "jdoe"
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_search_by_role_and_username(self, client):
        # Arrange
        await self.create(client, username="first", email="first@example.com")
        await self.create(client, username="second", email="second@example.com", role="ADMIN")

        # Act
        by_role = await client.post("/api/v2/users/search", json={"role": "ADMIN"})
        by_name = await client.post(
            "/api/v2/users/search", json={"username": "S", "sortBy": "username", "sortDirection": "asc"}
        )

        # Assert
        assert [user["username"] for user in by_role.json()["content"]] == ["second"]
        assert [user["username"] for user in by_name.json()["content"]] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_status_change(self, client):
        created = await self.create(client)

        changed = await client.put(f"/api/v2/users/{created['id']}/status", params={"status": "SUSPENDED"})
        rejected = await client.put(f"/api/v2/users/{created['id']}/status", params={"status": "BANNED"})

        assert changed.status_code == status.HTTP_200_OK
        assert changed.json()["status"] == "SUSPENDED"
        assert changed.json()["version"] == 1
        assert rejected.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_update_with_stale_version(self, client):
        created = await self.create(client)
        payload = user_factory.create_user_data(firstName="Jon", version=0)

        first = await client.put(f"/api/v2/users/{created['id']}", json=payload)
        stale = await client.put(f"/api/v2/users/{created['id']}", json=payload)

        assert first.status_code == status.HTTP_200_OK
        assert stale.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_update_can_clear_phone_and_keeps_role(self, client):
        # Arrange
        created = await self.create(client, phone="555-0100", role="ADMIN")

        # Act
        response = await client.put(
            f"/api/v2/users/{created['id']}", json=user_factory.create_user_data(phone=None, role=None)
        )

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["phone"] is None
        assert response.json()["role"] == "ADMIN"

    @pytest.mark.asyncio
    async def test_search_with_null_sort_uses_defaults(self, client):
        await self.create(client, username="zed", email="zed@example.com")
        await self.create(client, username="amy", email="amy@example.com")

        response = await client.post("/api/v2/users/search", json={"sortBy": None, "sortDirection": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["totalElements"] == 2

    @pytest.mark.asyncio
    async def test_generate_username(self, client):
        await self.create(client)

        response = await client.post("/api/v2/users/generate-username", params={"firstName": "Jane", "lastName": "Doe"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["username"] == "jdoe1"

    @pytest.mark.asyncio
    async def test_bulk_roles_and_statistics(self, client):
        # Arrange
        payload = {
            "users": [
                user_factory.create_user_data(username="ana", email="ana@example.com"),
                user_factory.create_user_data(username="bob", email="bob@example.com", role="ADMIN"),
                user_factory.create_user_data(username="cy", email="cy@example.com", role="MANAGER"),
            ]
        }
        bulk = await client.post("/api/v2/users/bulk", json=payload)
        await client.delete(f"/api/v2/users/{bulk.json()[2]['id']}")

        # Act
        roles = await client.get("/api/v2/users/roles")
        stats = await client.get("/api/v2/users/stats")

        # Assert
        assert bulk.status_code == status.HTTP_201_CREATED
        assert roles.json() == ["ADMIN", "MANAGER", "USER"]
        assert stats.json() == {
            "totalUsers": 3,
            "activeUsers": 2,
            "inactiveUsers": 1,
            "usersByRole": {"ADMIN": 1, "USER": 1},
            "usersByStatus": {"ACTIVE": 2},
        }
