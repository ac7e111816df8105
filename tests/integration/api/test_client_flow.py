from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from crm_core.domain.entities import Activity, FollowUp
from tests.utils.api_helpers import bearer, signup


async def create_client(client, user, **fields):
    payload = {"name": "Initech"}
    payload.update(fields)
    response = await client.post("/clients", json=payload, headers=bearer(user))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_client_lifecycle(client: AsyncClient):
    owner = await signup(client, "owner@acme.com", "Acme")

    created = await create_client(
        client, owner, email="", phone="555-0100", tags=["vip"], note="Met at expo"
    )
    assert created["status"] == "PROSPECT"
    assert created["email"] is None
    assert created["tags"] == ["vip"]

    update = await client.patch(
        f"/clients/{created['id']}", json={"status": "ACTIVE"}, headers=bearer(owner)
    )
    assert update.status_code == 200
    assert update.json()["status"] == "ACTIVE"
    assert update.json()["phone"] == "555-0100"

    fetched = await client.get(f"/clients/{created['id']}", headers=bearer(owner))
    assert fetched.json()["note"] == "Met at expo"

    deleted = await client.delete(f"/clients/{created['id']}", headers=bearer(owner))
    assert deleted.status_code == 200

    gone = await client.get(f"/clients/{created['id']}", headers=bearer(owner))
    assert gone.status_code == 403
    assert gone.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_search_and_status_filter(client: AsyncClient):
    owner = await signup(client, "owner@acme.com", "Acme")
    await create_client(client, owner, name="Initech", email="ceo@initech.com")
    await create_client(client, owner, name="Globex", status="ACTIVE")
    await create_client(client, owner, name="Hooli 100%", phone="555-0199")

    async def names(**params):
        response = await client.get("/clients", params=params, headers=bearer(owner))
        assert response.status_code == 200, response.text
        return sorted(c["name"] for c in response.json()["clients"])

    assert await names() == ["Globex", "Hooli 100%", "Initech"]
    assert await names(search="INITECH.COM") == ["Initech"]
    assert await names(search="0199") == ["Hooli 100%"]
    assert await names(search="%") == ["Hooli 100%"]
    assert await names(status="ACTIVE") == ["Globex"]
    assert await names(status="all") == ["Globex", "Hooli 100%", "Initech"]

    bad = await client.get("/clients", params={"status": "LOST"}, headers=bearer(owner))
    assert bad.status_code == 400


@pytest.mark.asyncio
async def test_invalid_client_payload(client: AsyncClient):
    owner = await signup(client, "owner@acme.com", "Acme")

    response = await client.post(
        "/clients", json={"name": "Initech", "email": "nope"}, headers=bearer(owner)
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_timeline_and_follow_ups(client: AsyncClient):
    owner = await signup(client, "owner@acme.com", "Acme")
    initech = await create_client(client, owner)

    for content, occurred_at in [
        ("Intro call", "2026-01-10T09:00:00Z"),
        ("Sent pricing", "2026-01-12T09:00:00Z"),
    ]:
        response = await client.post(
            f"/clients/{initech['id']}/activities",
            json={"type": "CALL", "content": content, "occurred_at": occurred_at},
            headers=bearer(owner),
        )
        assert response.status_code == 201, response.text

    timeline = await client.get(f"/clients/{initech['id']}/activities", headers=bearer(owner))
    assert [a["content"] for a in timeline.json()["activities"]] == ["Sent pricing", "Intro call"]

    later = await client.post(
        f"/clients/{initech['id']}/follow-ups",
        json={"reason": "Renewal", "due_date": "2026-06-01T09:00:00Z"},
        headers=bearer(owner),
    )
    sooner = await client.post(
        f"/clients/{initech['id']}/follow-ups",
        json={"reason": "Send contract", "due_date": "2026-02-01T09:00:00Z"},
        headers=bearer(owner),
    )
    assert later.status_code == sooner.status_code == 201

    todo = await client.get("/follow-ups", headers=bearer(owner))
    assert [(f["reason"], f["client_name"]) for f in todo.json()["follow_ups"]] == [
        ("Send contract", "Initech"),
        ("Renewal", "Initech"),
    ]

    toggled = await client.post(f"/follow-ups/{sooner.json()['id']}/toggle", headers=bearer(owner))
    assert toggled.json()["status"] == "DONE"

    patched = await client.patch(
        f"/follow-ups/{later.json()['id']}", json={"reason": "Renewal call"}, headers=bearer(owner)
    )
    assert patched.json()["reason"] == "Renewal call"
    assert patched.json()["status"] == "OPEN"


@pytest.mark.asyncio
async def test_deleting_client_removes_its_timeline(client: AsyncClient, db_session):
    owner = await signup(client, "owner@acme.com", "Acme")
    initech = await create_client(client, owner)
    await client.post(
        f"/clients/{initech['id']}/activities",
        json={"type": "NOTE", "content": "Hello"},
        headers=bearer(owner),
    )
    await client.post(
        f"/clients/{initech['id']}/follow-ups",
        json={"reason": "Call", "due_date": "2026-02-01T09:00:00Z"},
        headers=bearer(owner),
    )

    response = await client.delete(f"/clients/{initech['id']}", headers=bearer(owner))
    assert response.status_code == 200

    client_id = UUID(initech["id"])
    activities = (await db_session.exec(select(Activity).where(Activity.client_id == client_id))).all()
    follow_ups = (await db_session.exec(select(FollowUp).where(FollowUp.client_id == client_id))).all()
    assert activities == [] and follow_ups == []


@pytest.mark.asyncio
async def test_other_workspace_data_is_not_found(client: AsyncClient):
    acme = await signup(client, "owner@acme.com", "Acme")
    globex = await signup(client, "owner@globex.com", "Globex")
    initech = await create_client(client, acme)
    activity = await client.post(
        f"/clients/{initech['id']}/activities",
        json={"type": "NOTE", "content": "Private"},
        headers=bearer(acme),
    )
    follow_up = await client.post(
        f"/clients/{initech['id']}/follow-ups",
        json={"reason": "Private", "due_date": "2026-02-01T09:00:00Z"},
        headers=bearer(acme),
    )
    client_url = f"/clients/{initech['id']}"
    follow_up_url = f"/follow-ups/{follow_up.json()['id']}"

    attempts = [
        await client.get(client_url, headers=bearer(globex)),
        await client.patch(client_url, json={"name": "Mine"}, headers=bearer(globex)),
        await client.delete(client_url, headers=bearer(globex)),
        await client.get(f"{client_url}/activities", headers=bearer(globex)),
        await client.post(
            f"{client_url}/activities",
            json={"type": "NOTE", "content": "Hi"},
            headers=bearer(globex),
        ),
        await client.delete(f"/activities/{activity.json()['id']}", headers=bearer(globex)),
        await client.get("/follow-ups", params={"client_id": initech["id"]}, headers=bearer(globex)),
        await client.post(
            f"{client_url}/follow-ups",
            json={"reason": "Hi", "due_date": "2026-02-01T09:00:00Z"},
            headers=bearer(globex),
        ),
        await client.patch(follow_up_url, json={"reason": "Mine"}, headers=bearer(globex)),
        await client.post(f"{follow_up_url}/toggle", headers=bearer(globex)),
        await client.delete(follow_up_url, headers=bearer(globex)),
    ]

    for response in attempts:
        assert response.status_code == 403, response.request.url
        assert response.json()["error"]["code"] == "NOT_FOUND"

    # Lists never leak across workspaces
    assert (await client.get("/clients", headers=bearer(globex))).json()["clients"] == []
    assert (await client.get("/follow-ups", headers=bearer(globex))).json()["follow_ups"] == []

    # And the owner's data is untouched
    still_there = await client.get(client_url, headers=bearer(acme))
    assert still_there.json()["name"] == "Initech"
    todo = await client.get("/follow-ups", headers=bearer(acme))
    assert [f["status"] for f in todo.json()["follow_ups"]] == ["OPEN"]
