import pytest

from app.api.routers import reservations as reservations_router
from app.services import reservation_service


ACADEMY = {"id": "a1", "name": "수학나라", "subject": "수학", "owner_id": "owner-1"}


def _reservation(**kw):
    base = {
        "id": "r1",
        "academy_id": "a1",
        "parent_id": "u1",
        "student_name": "김민준",
        "student_grade": "중2",
        "reservation_date": "2026-03-10",
        "reservation_time": "15:30",
        "message": None,
        "status": "pending",
        "created_at": "2026-03-01T09:00:00Z",
        "updated_at": "2026-03-01T09:00:00Z",
    }
    base.update(kw)
    return base


def _fake_update(calls):
    def update(rid, status):
        calls.append((rid, status))
        return _reservation(id=rid, status=status)
    return update


# ---- servicio ----

def test_create_reservation_forces_pending_and_parent(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: ACADEMY)
    monkeypatch.setattr(reservation_service, "_insert_reservation", lambda doc: {**doc, "id": "r9"})
    out = reservation_service.create_reservation(
        "u1", {"academy_id": "a1", "student_name": "김민준", "status": "completed",
               "reservation_date": "2026-03-10", "reservation_time": "15:30"},
    )
    assert out["status"] == "pending"
    assert out["parent_id"] == "u1"


def test_create_reservation_unknown_academy(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: None)
    with pytest.raises(LookupError):
        reservation_service.create_reservation("u1", {"academy_id": "zzz", "student_name": "x"})


def test_list_my_reservations_embeds_academy(monkeypatch):
    monkeypatch.setattr(
        reservation_service,
        "_list_by_parent",
        lambda _uid: [_reservation(), _reservation(id="r2", academy_id="gone")],
    )
    monkeypatch.setattr(reservation_service, "_get_academies_by_ids", lambda ids: {"a1": ACADEMY})
    out = reservation_service.list_my_reservations("u1")
    assert out[0]["academy"] == {"id": "a1", "name": "수학나라"}
    assert out[1]["academy"] is None


def test_cancel_reservation_by_parent(monkeypatch):
    calls = []
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(status="confirmed"))
    monkeypatch.setattr(reservation_service, "_update_status", _fake_update(calls))
    assert reservation_service.cancel_reservation("u1", "r1")["status"] == "cancelled"
    assert calls == [("r1", "cancelled")]


def test_cancel_reservation_of_someone_else_is_not_found(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(parent_id="other"))
    with pytest.raises(LookupError):
        reservation_service.cancel_reservation("u1", "r1")


def test_cancel_completed_reservation_is_rejected(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(status="completed"))
    monkeypatch.setattr(reservation_service, "_update_status", lambda rid, s: pytest.fail("no debe actualizar"))
    with pytest.raises(ValueError):
        reservation_service.cancel_reservation("u1", "r1")


def test_cancel_twice_is_a_noop(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(status="cancelled"))
    monkeypatch.setattr(reservation_service, "_update_status", lambda rid, s: pytest.fail("no debe actualizar"))
    assert reservation_service.cancel_reservation("u1", "r1")["status"] == "cancelled"


def test_owner_confirms_then_completes(monkeypatch):
    calls = []
    current = {"status": "pending"}
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: ACADEMY)
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(status=current["status"]))
    monkeypatch.setattr(reservation_service, "_update_status", _fake_update(calls))

    assert reservation_service.update_reservation_status("owner-1", "r1", "confirmed")["status"] == "confirmed"
    current["status"] = "confirmed"
    assert reservation_service.update_reservation_status("owner-1", "r1", "completed")["status"] == "completed"
    assert calls == [("r1", "confirmed"), ("r1", "completed")]


def test_owner_cannot_skip_to_completed(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: ACADEMY)
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation(status="pending"))
    with pytest.raises(ValueError):
        reservation_service.update_reservation_status("owner-1", "r1", "completed")


def test_status_update_requires_owner(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: ACADEMY)
    monkeypatch.setattr(reservation_service, "_get_reservation", lambda _id: _reservation())
    with pytest.raises(PermissionError):
        reservation_service.update_reservation_status("u1", "r1", "confirmed")


def test_academy_agenda_requires_owner(monkeypatch):
    monkeypatch.setattr(reservation_service, "_get_academy", lambda _id: ACADEMY)
    monkeypatch.setattr(reservation_service, "_list_by_academy", lambda _id: [_reservation()])
    assert [r["id"] for r in reservation_service.list_academy_reservations("owner-1", "a1")] == ["r1"]
    with pytest.raises(PermissionError):
        reservation_service.list_academy_reservations("u1", "a1")


# ---- API ----

def test_post_reservation(auth_client, api, monkeypatch):
    seen = {}

    def fake_create(uid, doc):
        seen.update(uid=uid, doc=doc)
        return _reservation(**doc)

    monkeypatch.setattr(reservations_router, "create_reservation", fake_create)
    r = auth_client.post(f"{api}/reservations", json={
        "academy_id": "a1", "student_name": "김민준", "reservation_date": "2026-03-10", "reservation_time": "15:30",
    })
    assert r.status_code == 201
    assert seen["uid"] == "u1"
    assert seen["doc"]["reservation_date"] == "2026-03-10"
    assert r.json()["status"] == "pending"


def test_post_reservation_rejects_bad_time(auth_client, api):
    r = auth_client.post(f"{api}/reservations", json={
        "academy_id": "a1", "student_name": "김민준", "reservation_date": "2026-03-10", "reservation_time": "25:00",
    })
    assert r.status_code == 422


def test_list_my_reservations_endpoint(auth_client, api, monkeypatch):
    monkeypatch.setattr(
        reservations_router,
        "list_my_reservations",
        lambda uid: [{**_reservation(), "academy": {"id": "a1", "name": "수학나라"}}],
    )
    body = auth_client.get(f"{api}/reservations").json()
    assert body["reservations"][0]["academy"]["name"] == "수학나라"


def test_cancel_completed_returns_conflict(auth_client, api, monkeypatch):
    def reject(uid, rid):
        raise ValueError("La reserva ya fue completada")

    monkeypatch.setattr(reservations_router, "cancel_reservation", reject)
    assert auth_client.post(f"{api}/reservations/r1/cancel").status_code == 409


def test_agenda_forbidden_for_non_owner(auth_client, api, monkeypatch):
    def forbid(uid, aid):
        raise PermissionError("Solo el dueño de la academia puede gestionar sus reservas")

    monkeypatch.setattr(reservations_router, "list_academy_reservations", forbid)
    assert auth_client.get(f"{api}/reservations/academy/a1").status_code == 403


def test_patch_status_rejects_unknown_value(auth_client, api):
    r = auth_client.patch(f"{api}/reservations/r1/status", json={"status": "pending"})
    assert r.status_code == 422


def test_patch_status(auth_client, api, monkeypatch):
    monkeypatch.setattr(
        reservations_router,
        "update_reservation_status",
        lambda uid, rid, status: _reservation(id=rid, status=status),
    )
    r = auth_client.patch(f"{api}/reservations/r1/status", json={"status": "confirmed"})
    assert r.status_code == 200
    assert r.json()["status"] == "confirmed"


def test_reservations_require_token(client, api):
    assert client.get(f"{api}/reservations").status_code == 401
