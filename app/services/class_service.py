"""Servicios de clases de una academia.

Las clases se devuelven con `schedule_entries` ya parseadas para que el
cliente no repita la lógica del parser.
"""
from typing import Dict, Any, List

from app.repositories.academies_repo import get_academy as _get_academy
from app.repositories.classes_repo import (
    insert_class as _insert_class,
    list_classes_by_academy as _list_classes_by_academy,
)
from app.services.schedule_parser import parse_schedule_multiple


def with_schedule_entries(cls: Dict[str, Any]) -> Dict[str, Any]:
    return {**cls, "schedule_entries": [e.to_dict() for e in parse_schedule_multiple(cls.get("schedule"))]}


def list_classes(academy_id: str) -> List[Dict[str, Any]]:
    if not _get_academy(academy_id):
        raise LookupError("Academia no encontrada")
    return [with_schedule_entries(c) for c in _list_classes_by_academy(academy_id)]


def create_class(user_id: str, academy_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
    """Crea una clase; solo el dueño de la academia puede hacerlo."""
    academy = _get_academy(academy_id)
    if not academy:
        raise LookupError("Academia no encontrada")
    if academy.get("owner_id") != str(user_id):
        raise PermissionError("Solo el dueño de la academia puede crear clases")
    data = {**doc, "academy_id": str(academy_id)}
    return with_schedule_entries(_insert_class(data))
