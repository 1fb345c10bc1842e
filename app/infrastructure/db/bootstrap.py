"""
Bootstrap de la base Mongo: define y aplica validadores (JSON Schema) e índices.
Se ejecuta al inicio de la app para asegurar colecciones mínimas y consistencia.
No tumba la app si algo falla; deja warnings en casos no críticos.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging
from pymongo.errors import PyMongoError
from app.infrastructure.db.mongo import get_db

_log = logging.getLogger("academy.mongo.bootstrap")

_TS = {"bsonType": "string", "minLength": 10}


def _collmod_or_create(name: str, validator: Dict[str, Any] | None) -> None:
    db = get_db()
    try:
        if validator:
            # Intenta aplicar validator con collMod
            db.command({
                "collMod": name,
                "validator": {"$jsonSchema": validator},
                "validationLevel": "moderate",
            })
        else:
            db.create_collection(name)
    except PyMongoError:
        # Si collMod falla (colección inexistente), intenta crear con validator
        try:
            if name not in db.list_collection_names():
                if validator:
                    db.create_collection(name, validator={"$jsonSchema": validator})
                else:
                    db.create_collection(name)
        except PyMongoError as e:
            _log.warning("No se pudo aplicar validator en '%s': %s", name, e)


def _ensure_indexes(name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = get_db()[name]
    for ix in indexes:
        ix = dict(ix)
        keys = ix.pop("keys")
        try:
            coll.create_index(keys, **ix)
        except PyMongoError as e:
            # Ignora fallas de índice (e.g., datos no únicos previos)
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


def ensure_collections() -> None:
    """
    Garantiza colecciones, validadores e índices mínimos.
    """
    academy_validator = {
        "bsonType": "object",
        "required": ["name", "subject", "created_at", "updated_at"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "subject": {"bsonType": "string"},
            "description": {"bsonType": ["string", "null"]},
            "address": {"bsonType": ["string", "null"]},
            "target_grade": {"bsonType": ["string", "null"]},
            "tags": {"bsonType": "array", "items": {"bsonType": "string"}},
            "is_mou": {"bsonType": "bool"},
            "owner_id": {"bsonType": ["string", "null"]},
            "business_number": {"bsonType": ["string", "null"], "pattern": "^\\d{3}-\\d{2}-\\d{5}$"},
            "profile_image": {"bsonType": ["string", "null"]},
            "created_at": _TS,
            "updated_at": _TS,
        },
        "additionalProperties": True,
    }
    _collmod_or_create("academy", academy_validator)
    _ensure_indexes("academy", [
        {"keys": [("subject", 1), ("created_at", -1)], "name": "ix_academy_subject"},
        {"keys": [("owner_id", 1)], "name": "ix_academy_owner"},
        {"keys": [("tags", 1)], "name": "ix_academy_tags"},
    ])

    # Clases de una academia; `schedule` es texto libre ("월/수/금 18:00~22:00")
    class_validator = {
        "bsonType": "object",
        "required": ["academy_id", "name", "created_at", "updated_at"],
        "properties": {
            "academy_id": {"bsonType": "string"},
            "name": {"bsonType": "string", "minLength": 1},
            "description": {"bsonType": ["string", "null"]},
            "schedule": {"bsonType": ["string", "null"]},
            "target_grade": {"bsonType": ["string", "null"]},
            "fee": {"bsonType": ["int", "long", "null"], "minimum": 0},
            "is_recruiting": {"bsonType": "bool"},
            "teacher_id": {"bsonType": ["string", "null"]},
            "created_at": _TS,
            "updated_at": _TS,
        },
        "additionalProperties": True,
    }
    _collmod_or_create("academy_class", class_validator)
    _ensure_indexes("academy_class", [
        {"keys": [("academy_id", 1), ("created_at", 1)], "name": "ix_class_academy"},
    ])

    enrollment_validator = {
        "bsonType": "object",
        "required": ["user_id", "class_id", "created_at"],
        "properties": {
            "user_id": {"bsonType": "string"},
            "class_id": {"bsonType": "string"},
            "created_at": _TS,
        },
        "additionalProperties": True,
    }
    _collmod_or_create("class_enrollment", enrollment_validator)
    _ensure_indexes("class_enrollment", [
        {"keys": [("user_id", 1), ("class_id", 1)], "unique": True, "name": "uniq_user_class"},
        {"keys": [("user_id", 1), ("created_at", 1)], "name": "ix_enrollment_user_created"},
    ])

    bookmark_validator = {
        "bsonType": "object",
        "required": ["user_id", "academy_id", "created_at"],
        "properties": {
            "user_id": {"bsonType": "string"},
            "academy_id": {"bsonType": "string"},
            "created_at": _TS,
        },
        "additionalProperties": True,
    }
    _collmod_or_create("bookmark", bookmark_validator)
    _ensure_indexes("bookmark", [
        {"keys": [("user_id", 1), ("academy_id", 1)], "unique": True, "name": "uniq_user_academy"},
        {"keys": [("user_id", 1), ("created_at", -1)], "name": "ix_bookmark_user_created"},
    ])

    # Reservas de visita/consulta de un padre a una academia
    reservation_validator = {
        "bsonType": "object",
        "required": ["academy_id", "parent_id", "student_name", "reservation_date", "reservation_time", "status", "created_at"],
        "properties": {
            "academy_id": {"bsonType": "string"},
            "parent_id": {"bsonType": "string"},
            "student_name": {"bsonType": "string", "minLength": 1},
            "student_grade": {"bsonType": ["string", "null"]},
            "reservation_date": {"bsonType": "string", "pattern": "^\\d{4}-\\d{2}-\\d{2}$"},
            "reservation_time": {"bsonType": "string", "pattern": "^\\d{2}:\\d{2}$"},
            "message": {"bsonType": ["string", "null"]},
            "status": {"enum": ["pending", "confirmed", "completed", "cancelled"]},
            "created_at": _TS,
            "updated_at": _TS,
        },
        "additionalProperties": True,
    }
    _collmod_or_create("consultation_reservation", reservation_validator)
    _ensure_indexes("consultation_reservation", [
        {"keys": [("parent_id", 1), ("reservation_date", -1)], "name": "ix_reservation_parent_date"},
        {"keys": [("academy_id", 1), ("reservation_date", 1), ("reservation_time", 1)], "name": "ix_reservation_academy_slot"},
    ])

    _log.info("Colecciones/índices verificados")
