import asyncio
from patient_records.core.errors import INTERNAL_ERROR
from patient_records.main import app
from patient_records.modules.records.router import svc

INVALID_STATUS = "Invalid status. Must be one of: Inquiry, Onboarding, Active, Churned"


async def test_create_and_list_example(client, ada):
    resp = await client.post("/records", json=ada)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == 1
    assert created["status"] == "Active"
    assert created["middleName"] is None
    assert created["createdAt"] == created["updatedAt"]

    resp = await client.get("/records")
    assert resp.status_code == 200
    assert resp.json() == [created]


async def test_get_round_trip(client, ada):
    created = (await client.post("/records", json={**ada, "middleName": "  King "})).json()
    assert created["middleName"] == "King"

    resp = await client.get(f"/records/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


async def test_create_trims_strings(client, ada):
    resp = await client.post("/records", json={**ada, "firstName": "  Ada ", "city": " London"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["firstName"] == "Ada"
    assert body["city"] == "London"


async def test_create_rejects_unknown_status(client, ada):
    resp = await client.post("/records", json={**ada, "status": "Pending"})
    assert resp.status_code == 400
    assert resp.json() == {"error": INVALID_STATUS}
    assert (await client.get("/records")).json() == []


async def test_create_requires_fields(client, ada):
    del ada["lastName"]
    resp = await client.post("/records", json=ada)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required field: lastName"}


async def test_create_rejects_blank_field(client, ada):
    resp = await client.post("/records", json={**ada, "zipCode": "   "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required field: zipCode"}


async def test_create_rejects_future_date_of_birth(client, ada):
    resp = await client.post("/records", json={**ada, "dateOfBirth": "2999-01-01"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "dateOfBirth cannot be in the future"}


async def test_create_rejects_bad_date(client, ada):
    resp = await client.post("/records", json={**ada, "dateOfBirth": "10/12/1815"})
    assert resp.status_code == 400
    assert "dateOfBirth" in resp.json()["error"]


async def test_malformed_json(client):
    resp = await client.post("/records", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON body"}


async def test_non_numeric_id(client):
    for method in ("GET", "PUT", "DELETE"):
        for raw in ("abc", "12abc"):
            kwargs = {"json": {"status": "Active"}} if method == "PUT" else {}
            resp = await client.request(method, f"/records/{raw}", **kwargs)
            assert resp.status_code == 400, (method, raw)
            assert resp.json() == {"error": "Invalid record ID"}


async def test_out_of_range_id(client):
    for method in ("GET", "PUT", "DELETE"):
        kwargs = {"json": {"status": "Active"}} if method == "PUT" else {}
        resp = await client.request(method, "/records/99999999999999999999", **kwargs)
        assert resp.status_code == 400, method
        assert resp.json() == {"error": "Invalid record ID"}


async def test_unknown_id(client):
    resp = await client.get("/records/7")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Record not found"}

    resp = await client.put("/records/7", json={"status": "Active"})
    assert resp.status_code == 404


async def test_update_status(client, ada):
    created = (await client.post("/records", json=ada)).json()
    await asyncio.sleep(0.01)

    resp = await client.put(f"/records/{created['id']}", json={"status": "Onboarding"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["status"] == "Onboarding"
    assert updated["updatedAt"] > updated["createdAt"]
    for key in ("firstName", "lastName", "dateOfBirth", "street", "city", "state", "zipCode", "createdAt"):
        assert updated[key] == created[key]


async def test_update_with_unchanged_values_touches_updated_at(client, ada):
    created = (await client.post("/records", json=ada)).json()
    await asyncio.sleep(0.02)

    resp = await client.put(f"/records/{created['id']}", json={"status": "Active"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["status"] == "Active"
    assert updated["updatedAt"] > updated["createdAt"]


async def test_update_rejects_invalid_values(client, ada):
    created = (await client.post("/records", json=ada)).json()
    url = f"/records/{created['id']}"

    resp = await client.put(url, json={"status": "Lost"})
    assert resp.status_code == 400
    assert resp.json() == {"error": INVALID_STATUS}

    resp = await client.put(url, json={"firstName": None})
    assert resp.status_code == 400
    assert resp.json() == {"error": "firstName cannot be null"}

    resp = await client.put(url, json={"dateOfBirth": "2999-01-01"})
    assert resp.status_code == 400

    assert (await client.get(url)).json() == created


async def test_update_with_no_fields_returns_current(client, ada):
    created = (await client.post("/records", json=ada)).json()
    resp = await client.put(f"/records/{created['id']}", json={"id": 999, "createdAt": "x"})
    assert resp.status_code == 200
    assert resp.json() == created


async def test_delete(client, ada):
    created = (await client.post("/records", json=ada)).json()

    resp = await client.delete(f"/records/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Record deleted successfully"}

    resp = await client.delete(f"/records/{created['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Record not found"}


async def test_search(client, ada):
    await client.post("/records", json=ada)
    await client.post("/records", json={**ada, "firstName": "Grace", "lastName": "Hopper", "status": "Inquiry"})

    resp = await client.get("/records", params={"search": "love"})
    assert [r["lastName"] for r in resp.json()] == ["Lovelace"]

    resp = await client.get("/records", params={"search": "INQ"})
    assert [r["firstName"] for r in resp.json()] == ["Grace"]

    resp = await client.get("/records", params={"search": ""})
    assert len(resp.json()) == 2


async def test_unexpected_failure_is_generic_500(client):
    class Broken:
        async def search(self, term):
            raise RuntimeError("disk on fire")

    app.dependency_overrides[svc] = lambda: Broken()
    resp = await client.get("/records")
    assert resp.status_code == 500
    assert resp.json() == {"error": INTERNAL_ERROR}
    assert "disk" not in resp.text


async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}
