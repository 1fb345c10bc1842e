"""Repo de la colección `academy_class` (clases ofrecidas por una academia)."""
from typing import Dict, Any, Iterator, List, Optional
from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId
from app.infrastructure.db.mongo import get_db

COLLECTION = "academy_class"


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


def insert_class(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta clase y devuelve el documento guardado. `schedule` se guarda tal cual."""
    db = get_db()
    data = dict(doc)
    now = _now_iso()
    data.setdefault("is_recruiting", True)
    data.setdefault("created_at", now)
    data["updated_at"] = now
    res = db[COLLECTION].insert_one(data)
    return _out({**data, "_id": res.inserted_id})


def get_class(class_id: str) -> Optional[Dict[str, Any]]:
    oid = _oid(class_id)
    if oid is None:
        return None
    doc = get_db()[COLLECTION].find_one({"_id": oid})
    return _out(doc) if doc else None


def get_classes_by_ids(ids: List[str]) -> Dict[str, Dict[str, Any]]:
    oids = [o for o in (_oid(i) for i in ids) if o is not None]
    if not oids:
        return {}
    return {str(d["_id"]): _out(d) for d in get_db()[COLLECTION].find({"_id": {"$in": oids}})}


def list_classes_by_academy(academy_id: str) -> List[Dict[str, Any]]:
    cur = get_db()[COLLECTION].find({"academy_id": str(academy_id)}).sort("created_at", 1)
    return [_out(d) for d in cur]


def iter_all_classes() -> Iterator[Dict[str, Any]]:
    """Recorre todas las clases (solo id, nombre y horario); usado por scripts."""
    for d in get_db()[COLLECTION].find({}, {"name": 1, "schedule": 1, "academy_id": 1}):
        yield _out(d)


def update_schedule(class_id: str, schedule: str) -> bool:
    oid = _oid(class_id)
    if oid is None:
        return False
    res = get_db()[COLLECTION].update_one(
        {"_id": oid},
        {"$set": {"schedule": schedule, "updated_at": _now_iso()}},
    )
    return res.modified_count > 0
