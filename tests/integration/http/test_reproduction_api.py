from __future__ import annotations


async def create_sow(client, ear_tag: str = "S-200") -> dict:
    response = await client.post("/api/v1/sows", json={"ear_tag": ear_tag})
    assert response.status_code == 201
    return response.json()


async def test_heat_registration_returns_warnings_and_rule_errors(client):
    sow = await create_sow(client)

    first = await client.post(
        "/api/v1/heats", json={"sow_id": sow["id"], "heat_date": "2024-03-01"}
    )
    assert first.status_code == 201
    assert first.json()["warnings"] == []
    assert first.json()["status"] == "detected"

    second = await client.post(
        "/api/v1/heats",
        json={"sow_id": sow["id"], "heat_date": "2024-03-20", "intensity": "high"},
    )
    assert second.status_code == 201
    assert len(second.json()["warnings"]) == 1

    rejected = await client.post(
        "/api/v1/heats", json={"sow_id": sow["id"], "heat_date": "2024-03-25"}
    )
    assert rejected.status_code == 422
    body = rejected.json()
    assert body["code"] == "reproductive_rule_violation"
    assert "too short (5 days" in body["details"]["errors"][0]
    assert body["details"]["warnings"] == []

    status = await client.get(f"/api/v1/sows/{sow['id']}/reproductive-status")
    assert status.status_code == 200
    data = status.json()
    assert data["reproductive_status"] == "in_heat"
    assert data["derived_status"] == "in_heat"
    assert data["in_sync"] is True
    assert data["last_heat"]["heat_date"] == "2024-03-20"


async def test_validation_endpoints_never_write(client):
    sow = await create_sow(client)

    ok = await client.post(
        "/api/v1/reproduction/validate/heat",
        json={"sow_id": sow["id"], "heat_date": "2024-03-01"},
    )
    assert ok.json() == {"valid": True, "errors": [], "warnings": []}

    heats = await client.get("/api/v1/heats", params={"sow_id": sow["id"]})
    assert heats.json() == []

    missing = await client.post(
        "/api/v1/reproduction/validate/heat",
        json={"sow_id": "00000000-0000-0000-0000-000000000000", "heat_date": "2024-03-01"},
    )
    assert missing.status_code == 200
    assert missing.json()["errors"] == ["Sow not found"]


async def test_full_cycle_over_http(client):
    sow = await create_sow(client)
    boar = (await client.post("/api/v1/boars", json={"ear_tag": "B-1"})).json()
    heat = (
        await client.post("/api/v1/heats", json={"sow_id": sow["id"], "heat_date": "2023-08-28"})
    ).json()

    service = await client.post(
        "/api/v1/services",
        json={
            "sow_id": sow["id"],
            "heat_id": heat["id"],
            "service_date": "2023-08-28",
            "service_type": "natural",
            "boar_id": boar["id"],
            "semen_batch": "ignored",
        },
    )
    assert service.status_code == 201
    assert service.json()["service_number"] == 1
    assert service.json()["semen_batch"] is None

    pregnancy = await client.post(
        "/api/v1/pregnancies",
        json={
            "sow_id": sow["id"],
            "service_id": service.json()["id"],
            "conception_date": "2023-08-28",
            "confirmed": True,
            "confirmation_date": "2023-09-25",
            "confirmation_method": "ultrasound",
        },
        headers={"X-Actor": "vet"},
    )
    assert pregnancy.status_code == 201
    assert pregnancy.json()["expected_farrowing_date"] == "2023-12-20"

    stored = (await client.get(f"/api/v1/sows/{sow['id']}")).json()
    assert stored["reproductive_status"] == "pregnant"
    assert stored["updated_by"] == "vet"

    notifications = (await client.get("/api/v1/notifications")).json()
    assert [n["type"] for n in notifications["notifications"]] == ["pregnancy_confirmed"]
    assert notifications["unread_count"] == 1

    birth = await client.post(
        "/api/v1/births",
        json={
            "sow_id": sow["id"],
            "pregnancy_id": pregnancy.json()["id"],
            "birth_date": "2023-12-20",
            "born_alive": 4,
            "born_dead": 1,
            "mummified": 0,
        },
    )
    assert birth.status_code == 201
    assert birth.json()["expected_weaning_date"] == "2024-01-10"
    assert birth.json()["boar_id"] == boar["id"]

    piglets = (await client.get(f"/api/v1/births/{birth.json()['id']}/piglets")).json()
    assert len(piglets) == 5

    edit_closed = await client.patch(
        f"/api/v1/pregnancies/{pregnancy.json()['id']}",
        json={"conception_date": "2023-08-29"},
    )
    assert edit_closed.status_code == 409
    assert edit_closed.json()["code"] == "immutable_record"

    job = await client.post("/api/v1/reproduction/jobs/weaning", params={"today": "2024-01-15"})
    assert job.status_code == 200
    assert job.json() == {"processed_litters": 1, "piglets_weaned": 4, "failures": []}

    manual = await client.post(f"/api/v1/births/{birth.json()['id']}/wean")
    assert manual.status_code == 200
    assert manual.json()["already_weaned"] is True
    assert manual.json()["piglets_weaned"] == 0
    assert manual.json()["weaning_date"] == "2024-01-10"

    stored = (await client.get(f"/api/v1/sows/{sow['id']}")).json()
    assert stored["reproductive_status"] == "empty"
    assert stored["last_weaning_date"] == "2024-01-10"
    assert stored["parity_count"] == 1


async def test_heat_expiry_job_over_http(client):
    sow = await create_sow(client)
    await client.post("/api/v1/heats", json={"sow_id": sow["id"], "heat_date": "2024-01-01"})

    response = await client.post(
        "/api/v1/reproduction/jobs/heat-expiry", params={"today": "2024-01-10"}
    )

    assert response.status_code == 200
    assert response.json()["updated_count"] == 1
    assert response.json()["details"][0]["days_elapsed"] == 9
