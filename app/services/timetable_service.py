"""Arma la grilla semanal (시간표) a partir de las clases inscritas.

Cada clase aporta un bloque por entrada de su horario parseado; el color se
asigna por clase en orden de inscripción. Las clases cuyo horario no produce
entradas se listan en `unparsed` para que el cliente pueda avisar.
"""
from __future__ import annotations

from typing import Any, Dict, List

from app.services.schedule_parser import DAYS, DAY_INDEX, parse_schedule_multiple


# Paleta de colores (claves estables, el cliente resuelve el estilo)
CLASS_COLORS = ["blue", "green", "purple", "orange", "pink", "cyan", "yellow", "red"]

# Horas visibles en la grilla: 09:00 ~ 22:00
GRID_HOURS = list(range(9, 23))


def color_for(index: int) -> str:
    return CLASS_COLORS[index % len(CLASS_COLORS)]


def build_timetable(enrollments: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Convierte inscripciones (con `class` embebida) en bloques de la grilla.

    enrollments: [{"class_id": str, "class": {"id", "name", "schedule", "academy": {"name"}}}]
    """
    blocks: List[Dict[str, Any]] = []
    unparsed: List[str] = []
    for idx, enr in enumerate(enrollments):
        cls = enr.get("class") or {}
        class_id = str(cls.get("id") or enr.get("class_id") or "")
        entries = parse_schedule_multiple(cls.get("schedule"))
        if not entries:
            unparsed.append(class_id)
            continue
        color = color_for(idx)
        academy_name = (cls.get("academy") or {}).get("name")
        for e in entries:
            blocks.append({
                "class_id": class_id,
                "class_name": cls.get("name") or "",
                "academy_name": academy_name,
                "day": e.day,
                "day_index": DAY_INDEX.get(e.day, -1),
                "start_time": e.start_time,
                "end_time": e.end_time,
                "color": color,
            })
    blocks.sort(key=lambda b: (b["day_index"], b["start_time"]))
    return {
        "days": list(DAYS),
        "hours": GRID_HOURS,
        "blocks": blocks,
        "unparsed": unparsed,
    }
