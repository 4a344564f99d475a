from __future__ import annotations

from uuid import uuid4


async def test_sows_crud_flow(client):
    headers = {"X-Actor": "  ana  "}
    create_response = await client.post(
        "/api/v1/sows", json={"ear_tag": "S-100", "alias": "Lola"}, headers=headers
    )
    assert create_response.status_code == 201
    created = create_response.json()
    sow_id = created["id"]
    assert created["created_by"] == "ana"
    assert created["reproductive_status"] == "empty"
    assert created["parity_count"] == 0

    duplicate = await client.post("/api/v1/sows", json={"ear_tag": "S-100"})
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "conflict"

    list_response = await client.get("/api/v1/sows")
    assert list_response.status_code == 200
    body = list_response.json()
    assert body["total"] == 1
    assert body["items"][0]["id"] == sow_id

    update_response = await client.patch(
        f"/api/v1/sows/{sow_id}",
        json={"version": created["version"], "breed": "Landrace"},
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["breed"] == "Landrace"
    assert updated["version"] == created["version"] + 1

    stale = await client.patch(
        f"/api/v1/sows/{sow_id}", json={"version": created["version"], "alias": "Old"}
    )
    assert stale.status_code == 409

    deactivate = await client.delete(f"/api/v1/sows/{sow_id}")
    assert deactivate.status_code == 200
    assert deactivate.json()["status"] == "discarded"

    filtered = await client.get("/api/v1/sows", params={"status": "active"})
    assert filtered.json()["total"] == 0


async def test_unknown_sow_returns_error_payload(client):
    response = await client.get(f"/api/v1/sows/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"code": "not_found", "message": "Sow not found"}


async def test_invalid_body_uses_validation_error_code(client):
    response = await client.post("/api/v1/sows", json={"alias": "no tag"})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"][0]["loc"][-1] == "ear_tag"


async def test_health(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_boars_are_registered_and_listed(client):
    created = await client.post("/api/v1/boars", json={"ear_tag": "B-7", "name": "Titan"})
    assert created.status_code == 201

    listing = await client.get("/api/v1/boars")
    assert [b["ear_tag"] for b in listing.json()] == ["B-7"]
