"""Tests for owners API endpoints."""

import pytest


class TestOwnersAPI:
    """Tests for /api/owners endpoints."""

    @pytest.mark.asyncio
    async def test_search_owners(self, client, test_owner):
        """GET /api/owners searches by name."""
        response = await client.get("/api/owners?name=sarah&max_amount=5")

        assert response.status_code == 200
        data = response.json()
        assert [o["id"] for o in data] == [test_owner.id]

    @pytest.mark.asyncio
    async def test_search_owners_no_match(self, client, test_owner):
        """GET /api/owners returns empty for no match."""
        response = await client.get("/api/owners?name=nobody")

        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_owner(self, client, db_session):
        """POST /api/owners creates a new owner."""
        response = await client.post(
            "/api/owners",
            json={"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com"},
        )

        assert response.status_code == 201
        assert response.json()["last_name"] == "Doe"

    @pytest.mark.asyncio
    async def test_create_owner_missing_names(self, client, db_session):
        """POST /api/owners returns 422 with every violation."""
        response = await client.post("/api/owners", json={"email": "x@example.com"})

        assert response.status_code == 422
        assert response.json()["detail"]["errors"] == [
            "Owner first name is mandatory",
            "Owner last name is mandatory",
        ]
