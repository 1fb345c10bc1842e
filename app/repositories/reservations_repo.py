"""Repo de `consultation_reservation` (reservas de consulta en una academia).

`reservation_date` (YYYY-MM-DD) y `reservation_time` (HH:MM) se guardan como
texto para que el orden lexicográfico coincida con el cronológico.
"""
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from app.infrastructure.db.mongo import get_db

COLLECTION = "consultation_reservation"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _oid(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def _out(d: Dict[str, Any]) -> Dict[str, Any]:
    d = dict(d)
    d["id"] = str(d.pop("_id", ""))
    return d


def insert_reservation(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta la reserva en estado `pending` y devuelve el documento guardado."""
    data = dict(doc)
    now = _now_iso()
    data.setdefault("status", "pending")
    data["created_at"] = now
    data["updated_at"] = now
    res = get_db()[COLLECTION].insert_one(data)
    return _out({**data, "_id": res.inserted_id})


def get_reservation(reservation_id: str) -> Optional[Dict[str, Any]]:
    oid = _oid(reservation_id)
    if oid is None:
        return None
    doc = get_db()[COLLECTION].find_one({"_id": oid})
    return _out(doc) if doc else None


def list_by_parent(parent_id: str) -> List[Dict[str, Any]]:
    """Reservas del padre, la fecha más lejana primero."""
    cur = get_db()[COLLECTION].find({"parent_id": str(parent_id)}).sort(
        [("reservation_date", -1), ("reservation_time", -1)]
    )
    return [_out(d) for d in cur]


def list_by_academy(academy_id: str) -> List[Dict[str, Any]]:
    """Agenda de la academia en orden cronológico."""
    cur = get_db()[COLLECTION].find({"academy_id": str(academy_id)}).sort(
        [("reservation_date", 1), ("reservation_time", 1)]
    )
    return [_out(d) for d in cur]


def update_status(reservation_id: str, status: str) -> Optional[Dict[str, Any]]:
    """Cambia el estado; devuelve el documento actualizado o None si no existe."""
    oid = _oid(reservation_id)
    if oid is None:
        return None
    doc = get_db()[COLLECTION].find_one_and_update(
        {"_id": oid},
        {"$set": {"status": status, "updated_at": _now_iso()}},
        return_document=ReturnDocument.AFTER,
    )
    return _out(doc) if doc else None
