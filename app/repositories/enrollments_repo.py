"""Repo de `class_enrollment` (usuario inscrito en una clase).

El par (user_id, class_id) es único por índice; un duplicado propaga
`DuplicateKeyError` al servicio.
"""
from typing import Dict, Any, List
from datetime import datetime, timezone
from app.infrastructure.db.mongo import get_db

COLLECTION = "class_enrollment"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def insert_enrollment(user_id: str, class_id: str) -> str:
    res = get_db()[COLLECTION].insert_one({
        "user_id": str(user_id),
        "class_id": str(class_id),
        "created_at": _now_iso(),
    })
    return str(res.inserted_id)


def enrollment_exists(user_id: str, class_id: str) -> bool:
    doc = get_db()[COLLECTION].find_one({"user_id": str(user_id), "class_id": str(class_id)}, {"_id": 1})
    return doc is not None


def delete_enrollment(user_id: str, class_id: str) -> bool:
    res = get_db()[COLLECTION].delete_one({"user_id": str(user_id), "class_id": str(class_id)})
    return res.deleted_count > 0


def list_enrollments(user_id: str) -> List[Dict[str, Any]]:
    """Inscripciones del usuario en orden de creación (asc)."""
    cur = get_db()[COLLECTION].find({"user_id": str(user_id)}).sort("created_at", 1)
    out: List[Dict[str, Any]] = []
    for d in cur:
        d = dict(d)
        d["id"] = str(d.pop("_id", ""))
        out.append(d)
    return out
