from __future__ import annotations

import pytest


def _submit(client, **body):
    payload = {"user_id": 1, "start_date": "2025-06-01", "end_date": "2025-06-05"}
    payload.update(body)
    return client.post("/api/requests", json=payload)


def test_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.get_json()["message"]


def test_submit_then_owner_lists_it(client):
    resp = _submit(client, reason="Beach")
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["status"] == "Pending"
    assert created["start_date"] == "2025-06-01"
    assert created["comments"] is None

    resp = client.get("/api/requests/user/1")
    assert resp.status_code == 200
    rows = resp.get_json()
    assert [r["id"] for r in rows] == [created["id"]]
    assert rows[0]["user_name"] == "Alice Martin"
    assert rows[0]["duration_days"] == 5


@pytest.mark.parametrize(
    "body, message",
    [
        ({"user_id": None}, "user_id, start_date, and end_date are required"),
        ({"end_date": ""}, "user_id, start_date, and end_date are required"),
        ({"start_date": "2025-06-10"}, "End date must be after start date"),
    ],
)
def test_submit_validation_errors_are_400(client, body, message):
    resp = _submit(client, **body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": message}
    assert client.get("/api/requests").get_json() == []


def test_submit_storage_failure_is_generic_500(client, requests_repo):
    requests_repo.fail_next = True
    resp = _submit(client)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to create request"}


def test_approve_and_filter(client):
    created = _submit(client).get_json()
    _submit(client, user_id=2)

    resp = client.put(f"/api/requests/{created['id']}/status", json={"status": "Approved"})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "Approved"
    assert resp.get_json()["comments"] is None

    approved = client.get("/api/requests?status=Approved").get_json()
    assert [r["id"] for r in approved] == [created["id"]]
    assert len(client.get("/api/requests?status=All").get_json()) == 2
    assert len(client.get("/api/requests").get_json()) == 2


def test_reject_with_comments(client):
    created = _submit(client).get_json()
    resp = client.put(
        f"/api/requests/{created['id']}/status",
        json={"status": "Rejected", "comments": "not enough coverage"},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "Rejected"
    assert body["comments"] == "not enough coverage"


def test_status_update_errors(client):
    created = _submit(client).get_json()

    assert client.put(f"/api/requests/{created['id']}/status", json={"status": "Done"}).status_code == 400
    assert client.put(f"/api/requests/{created['id']}/status", json={}).status_code == 400
    assert client.put("/api/requests/999/status", json={"status": "Approved"}).status_code == 404

    assert client.put(f"/api/requests/{created['id']}/status", json={"status": "Approved"}).status_code == 200
    resp = client.put(f"/api/requests/{created['id']}/status", json={"status": "Rejected"})
    assert resp.status_code == 409
    assert resp.get_json() == {"error": "Request is already Approved"}


def test_unknown_status_filter_lists_nothing(client):
    _submit(client)

    for value in ("Cancelled", "approved"):
        resp = client.get(f"/api/requests?status={value}")
        assert resp.status_code == 200
        assert resp.get_json() == []


def test_reason_is_stored_as_sent(client):
    created = _submit(client, reason="  Beach  ").get_json()
    assert created["reason"] == "  Beach  "

    blank = _submit(client, reason="   ").get_json()
    assert blank["reason"] is None


def test_principal_header_enforces_roles(client):
    created = _submit(client).get_json()

    resp = client.put(
        f"/api/requests/{created['id']}/status",
        json={"status": "Approved"},
        headers={"X-User-Id": "1"},
    )
    assert resp.status_code == 403

    resp = client.get("/api/requests/user/1", headers={"X-User-Id": "2"})
    assert resp.status_code == 403

    resp = client.get("/api/requests", headers={"X-User-Id": "3"})
    assert resp.status_code == 200

    resp = client.post(
        "/api/requests",
        json={"start_date": "2025-07-01", "end_date": "2025-07-02"},
        headers={"X-User-Id": "2"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["user_id"] == 2


def test_unknown_principal_is_401(client):
    assert client.get("/api/requests", headers={"X-User-Id": "77"}).status_code == 401
    assert client.get("/api/requests", headers={"X-User-Id": "abc"}).status_code == 401


def test_principal_required_when_configured(app, client):
    app.config["REQUIRE_PRINCIPAL"] = True
    assert client.get("/api/requests").status_code == 401
    assert client.get("/api/requests", headers={"X-User-Id": "3"}).status_code == 200


def test_users_sorted_by_name(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    assert [u["name"] for u in resp.get_json()] == ["Alice Martin", "Bruno Costa", "Chloe Nguyen"]
    assert resp.get_json()[2]["role"] == "Validator"


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}
