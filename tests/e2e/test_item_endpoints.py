"""End-to-end tests for the item endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from hoard.config import Settings
from hoard.domain.model import User
from hoard.domain.service import UserService
from hoard.domain.value import UserId
from hoard.interface.api.app import create_app
from hoard.util.jwt import create_token
from tests.di import build_test_container

ALICE = User(id=UserId(uuid4()), email="alice@example.com")
CAROL = User(id=UserId(uuid4()), email="carol@example.com")


async def seed_users(container, *users: User) -> None:
    async with container() as request_container:
        user_service = await request_container.get(UserService)
        for user in users:
            await user_service.register(user)


def auth(user: User) -> dict[str, str]:
    token = create_token(str(user.id), user.email, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api():
    container = build_test_container()
    with TestClient(create_app(container)) as client:
        client.portal.call(seed_users, container, ALICE, CAROL)
        yield client


@pytest.fixture
def chest_id(api):
    response = api.post("/chests", json={"name": "Reading"}, headers=auth(ALICE))
    return response.json()["chest_id"]


def test_add_link_defaults_title(api, chest_id):
    response = api.post(
        f"/chests/{chest_id}/items",
        json={"type": "link", "url": "https://example.com", "tags": ["read"]},
        headers=auth(ALICE),
    )

    assert response.status_code == 201
    item = response.json()
    assert item["title"] == "https://example.com"
    assert item["tags"] == ["read"]
    assert item["stack_size"] == 1


def test_link_without_url(api, chest_id):
    response = api.post(
        f"/chests/{chest_id}/items", json={"type": "link"}, headers=auth(ALICE)
    )

    assert response.status_code == 400


def test_update_and_list(api, chest_id):
    created = api.post(
        f"/chests/{chest_id}/items",
        json={"type": "todo", "label": "Dune"},
        headers=auth(ALICE),
    ).json()

    updated = api.patch(
        f"/items/{created['item_id']}", json={"completed": True}, headers=auth(ALICE)
    )

    assert updated.status_code == 200
    assert updated.json()["completed"] is True
    assert updated.json()["label"] == "Dune"
    items = api.get(f"/chests/{chest_id}/items", headers=auth(ALICE)).json()["items"]
    assert [i["item_id"] for i in items] == [created["item_id"]]


def test_stranger_cannot_list(api, chest_id):
    response = api.get(f"/chests/{chest_id}/items", headers=auth(CAROL))

    assert response.status_code == 403


def test_delete_unknown_item(api, chest_id):
    response = api.delete(f"/items/{uuid4()}", headers=auth(ALICE))

    assert response.status_code == 404


def test_overlong_tag_is_unprocessable(api, chest_id):
    created = api.post(
        f"/chests/{chest_id}/items",
        json={"type": "note", "tags": ["x" * 65]},
        headers=auth(ALICE),
    )
    note = api.post(
        f"/chests/{chest_id}/items", json={"type": "note"}, headers=auth(ALICE)
    ).json()
    updated = api.patch(
        f"/items/{note['item_id']}", json={"tags": ["x" * 65]}, headers=auth(ALICE)
    )

    assert created.status_code == 422
    assert updated.status_code == 422
