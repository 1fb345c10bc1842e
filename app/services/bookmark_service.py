"""Bookmarks de academias (toggle y listado con detalle)."""
from typing import Dict, Any, List

from pymongo.errors import DuplicateKeyError

from app.repositories.academies_repo import (
    get_academy as _get_academy,
    get_academies_by_ids as _get_academies_by_ids,
)
from app.repositories.bookmarks_repo import (
    insert_bookmark as _insert_bookmark,
    delete_bookmark as _delete_bookmark,
    list_bookmarks as _list_bookmarks,
)


def toggle_bookmark(user_id: str, academy_id: str) -> bool:
    """Alterna el bookmark; devuelve el estado final (True = guardado)."""
    if _delete_bookmark(user_id, academy_id):
        return False
    if not _get_academy(academy_id):
        raise LookupError("Academia no encontrada")
    try:
        _insert_bookmark(user_id, academy_id)
    except DuplicateKeyError:
        # otra petición concurrente ya lo guardó
        pass
    return True


def list_bookmarked_academies(user_id: str) -> List[Dict[str, Any]]:
    """Academias guardadas en orden de guardado (más recientes primero)."""
    marks = _list_bookmarks(user_id)
    academies = _get_academies_by_ids([m["academy_id"] for m in marks])
    out: List[Dict[str, Any]] = []
    for m in marks:
        academy = academies.get(m["academy_id"])
        if academy:
            out.append({**academy, "bookmarked_at": m.get("created_at")})
    return out
