"""Repo de la colección `academy`.

- Expone `id` como str (ObjectId serializado).
- Sella timestamps en ISO-8601 UTC (Z).
"""
import re
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId
from app.infrastructure.db.mongo import get_db

COLLECTION = "academy"


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


def insert_academy(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta academia con defaults y devuelve el documento guardado (con `id`)."""
    db = get_db()
    data = dict(doc)
    now = _now_iso()
    data.setdefault("tags", [])
    data.setdefault("is_mou", False)
    data.setdefault("created_at", now)
    data["updated_at"] = now
    res = db[COLLECTION].insert_one(data)
    return _out({**data, "_id": res.inserted_id})


def get_academy(academy_id: str) -> Optional[Dict[str, Any]]:
    oid = _oid(academy_id)
    if oid is None:
        return None
    doc = get_db()[COLLECTION].find_one({"_id": oid})
    return _out(doc) if doc else None


def get_academies_by_ids(ids: List[str]) -> Dict[str, Dict[str, Any]]:
    """Mapa id -> academia; ignora ids inválidos."""
    oids = [o for o in (_oid(i) for i in ids) if o is not None]
    if not oids:
        return {}
    docs = get_db()[COLLECTION].find({"_id": {"$in": oids}})
    return {str(d["_id"]): _out(d) for d in docs}


def list_academies(
    skip: int,
    limit: int,
    subject: Optional[str] = None,
    q: Optional[str] = None,
    owner_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Lista academias (más recientes primero) con filtros básicos."""
    filtro: Dict[str, Any] = {}
    if subject:
        filtro["subject"] = subject
    if owner_id:
        filtro["owner_id"] = str(owner_id)
    if q:
        filtro["name"] = {"$regex": re.escape(q.strip()), "$options": "i"}
    cur = get_db()[COLLECTION].find(filtro).sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit)
    return [_out(d) for d in cur]
