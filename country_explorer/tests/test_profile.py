from __future__ import annotations

import httpx
import pytest

from country_explorer.services.profile import (
    LOAD_ERROR_MESSAGE,
    SUBMIT_ERROR_MESSAGE,
    ProfileService,
)
from country_explorer.services.remote_store import RemoteStoreClient
from country_explorer.tests.utils import STORE_URL, FakeRemoteStore

NEWEST_PATH = RemoteStoreClient.NEWEST_USER_PATH
ADD_PATH = RemoteStoreClient.ADD_USER_PATH

ADA = {"name": "Ada", "email": "ada@example.com", "country_name": "France", "bio": "Maths"}


def make_service(store: FakeRemoteStore) -> ProfileService:
    client = httpx.AsyncClient(base_url=STORE_URL, transport=store.transport())
    return ProfileService(RemoteStoreClient(client))


def fill_form(service: ProfileService) -> None:
    form = service.form
    form.name, form.email, form.country_name, form.bio = "Grace", "grace@example.com", "Japan", "Compilers"


class TestLoadNewest:
    @pytest.mark.asyncio
    async def test_prefills_form(self):
        store = FakeRemoteStore()
        store.users.append(ADA)
        service = make_service(store)

        profile = await service.load_newest()

        assert profile.name == "Ada"
        assert service.form.email == "ada@example.com"
        assert service.form.country_name == "France"
        assert service.form.welcome_message() == "Welcome back, Ada!"
        assert service.form.error == ""

    @pytest.mark.asyncio
    async def test_empty_store_means_no_user(self):
        service = make_service(FakeRemoteStore())

        assert await service.load_newest() is None
        assert service.form.welcome_message() == "Welcome back, User!"
        assert service.form.error == ""

    @pytest.mark.asyncio
    async def test_failure_sets_inline_error(self):
        store = FakeRemoteStore()
        store.fail_status[NEWEST_PATH] = 500
        service = make_service(store)

        assert await service.load_newest() is None
        assert service.form.error == LOAD_ERROR_MESSAGE


class TestSubmit:
    @pytest.mark.asyncio
    async def test_success_clears_fields_and_refreshes_newest(self):
        store = FakeRemoteStore()
        service = make_service(store)
        fill_form(service)

        assert await service.submit() is True

        assert store.users == [
            {"name": "Grace", "email": "grace@example.com", "country_name": "Japan", "bio": "Compilers"}
        ]
        assert service.form.name == ""
        assert service.form.bio == ""
        assert service.form.error == ""
        assert service.form.welcome_message() == "Welcome back, Grace!"
        assert [call[1] for call in store.calls] == [ADD_PATH, NEWEST_PATH]

    @pytest.mark.asyncio
    async def test_failure_preserves_fields(self):
        store = FakeRemoteStore()
        store.fail_status[ADD_PATH] = 400
        service = make_service(store)
        fill_form(service)

        assert await service.submit() is False

        assert service.form.error == SUBMIT_ERROR_MESSAGE
        assert service.form.name == "Grace"
        assert service.form.email == "grace@example.com"
        assert service.form.country_name == "Japan"
        assert service.form.bio == "Compilers"
        assert store.calls_to(NEWEST_PATH) == []

    @pytest.mark.asyncio
    async def test_error_cleared_on_next_attempt(self):
        store = FakeRemoteStore()
        store.fail_transport.add(ADD_PATH)
        service = make_service(store)
        fill_form(service)
        await service.submit()
        assert service.form.error == SUBMIT_ERROR_MESSAGE

        store.fail_transport.clear()
        assert await service.submit() is True
        assert service.form.error == ""
