"""Inscripciones de clases y grilla semanal del usuario."""
import logging
from typing import Dict, Any, List

from pymongo.errors import DuplicateKeyError

from app.repositories.academies_repo import get_academies_by_ids as _get_academies_by_ids
from app.repositories.classes_repo import (
    get_class as _get_class,
    get_classes_by_ids as _get_classes_by_ids,
)
from app.repositories.enrollments_repo import (
    insert_enrollment as _insert_enrollment,
    enrollment_exists as _enrollment_exists,
    delete_enrollment as _delete_enrollment,
    list_enrollments as _list_enrollments,
)
from app.services.timetable_service import build_timetable

_log = logging.getLogger("academy.enrollments")


def list_enrollments(user_id: str) -> List[Dict[str, Any]]:
    """Inscripciones con la clase embebida (y su academia: id + nombre)."""
    enrollments = _list_enrollments(user_id)
    classes = _get_classes_by_ids([e["class_id"] for e in enrollments])
    academies = _get_academies_by_ids([c.get("academy_id") for c in classes.values() if c.get("academy_id")])
    out: List[Dict[str, Any]] = []
    for e in enrollments:
        cls = classes.get(e["class_id"])
        if cls:
            academy = academies.get(cls.get("academy_id") or "")
            cls = {
                "id": cls["id"],
                "name": cls.get("name") or "",
                "schedule": cls.get("schedule"),
                "target_grade": cls.get("target_grade"),
                "fee": cls.get("fee"),
                "is_recruiting": cls.get("is_recruiting"),
                "academy": {"id": academy["id"], "name": academy.get("name")} if academy else None,
            }
        out.append({
            "id": e["id"],
            "class_id": e["class_id"],
            "created_at": e.get("created_at"),
            "class": cls,
        })
    return out


def is_enrolled(user_id: str, class_id: str) -> bool:
    return _enrollment_exists(user_id, class_id)


def enroll(user_id: str, class_id: str) -> bool:
    """Inscribe al usuario. Repetir la inscripción no es error (idempotente)."""
    if not _get_class(class_id):
        raise LookupError("Clase no encontrada")
    try:
        _insert_enrollment(user_id, class_id)
        _log.info("enroll user_id=%s class_id=%s", user_id, class_id)
    except DuplicateKeyError:
        _log.info("enroll duplicado user_id=%s class_id=%s", user_id, class_id)
    return True


def unenroll(user_id: str, class_id: str) -> bool:
    """Devuelve True si existía la inscripción."""
    removed = _delete_enrollment(user_id, class_id)
    if removed:
        _log.info("unenroll user_id=%s class_id=%s", user_id, class_id)
    return removed


def get_timetable(user_id: str) -> Dict[str, Any]:
    return build_timetable(list_enrollments(user_id))
