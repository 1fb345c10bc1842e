"""Repo de `bookmark` (academias guardadas por el usuario)."""
from typing import Dict, Any, List
from datetime import datetime, timezone
from app.infrastructure.db.mongo import get_db

COLLECTION = "bookmark"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def insert_bookmark(user_id: str, academy_id: str) -> str:
    res = get_db()[COLLECTION].insert_one({
        "user_id": str(user_id),
        "academy_id": str(academy_id),
        "created_at": _now_iso(),
    })
    return str(res.inserted_id)


def delete_bookmark(user_id: str, academy_id: str) -> bool:
    res = get_db()[COLLECTION].delete_one({"user_id": str(user_id), "academy_id": str(academy_id)})
    return res.deleted_count > 0


def list_bookmarks(user_id: str) -> List[Dict[str, Any]]:
    """Bookmarks del usuario (más recientes primero), sin `_id`."""
    projection = {"_id": 0}
    return list(get_db()[COLLECTION].find({"user_id": str(user_id)}, projection).sort("created_at", -1))
