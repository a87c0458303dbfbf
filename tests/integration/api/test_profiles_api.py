"""Integration tests for Profiles API."""

from collections.abc import Callable
from uuid import uuid4

import pytest
from httpx import AsyncClient

from domain.entities.profile import Profile
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from tests.factories import make_profile

UowFactory = Callable[[], SQLAlchemyUnitOfWork]


async def _seed(uow_factory: UowFactory, *profiles: Profile) -> None:
    async with uow_factory() as uow:
        for profile in profiles:
            await uow.profiles.insert(profile)
        await uow.commit()


class TestProfilesAPI:
    @pytest.mark.asyncio
    async def test_list_profiles(self, api_client: AsyncClient, uow_factory: UowFactory):
        await _seed(
            uow_factory,
            make_profile(email="zed@example.com", username="zed"),
            make_profile(email="amy@example.com", username="amy", activation_token=None),
        )

        response = await api_client.get("/apis/profile/")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["profileUsername"] for p in data] == ["amy", "zed"]
        assert data[0]["profileActivated"] is True
        assert data[1]["profileActivated"] is False

    @pytest.mark.asyncio
    async def test_get_profile(self, api_client: AsyncClient, uow_factory: UowFactory):
        profile = make_profile()
        await _seed(uow_factory, profile)

        response = await api_client.get(f"/apis/profile/{profile.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["profileId"] == str(profile.id)
        assert data["profileEmail"] == profile.email
        assert data["profileUsername"] == profile.username

    @pytest.mark.asyncio
    async def test_secrets_stay_server_side(
        self, api_client: AsyncClient, uow_factory: UowFactory
    ):
        profile = make_profile()
        await _seed(uow_factory, profile)

        response = await api_client.get(f"/apis/profile/{profile.id}")

        assert "profileHash" not in response.json()["data"]
        assert "profileActivationToken" not in response.json()["data"]
        assert profile.password_hash not in response.text
        assert profile.activation_token not in response.text

    @pytest.mark.asyncio
    async def test_get_unknown_profile(self, api_client: AsyncClient):
        response = await api_client.get(f"/apis/profile/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, api_client: AsyncClient):
        response = await api_client.get("/apis/profile/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_INPUT"
