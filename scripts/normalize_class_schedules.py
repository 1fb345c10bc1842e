#!/usr/bin/env python
"""
Revisa el campo `schedule` de todas las clases (`academy_class`) y lo lleva
al formato canónico "월 18:00~20:00, 수 19:00~21:00".

- Sin --apply solo imprime los cambios propuestos.
- Reporta clases cuyo horario no se pudo interpretar (no se tocan).

Uso:
  PYTHONPATH=. python scripts/normalize_class_schedules.py [--apply]
"""
from __future__ import annotations

import argparse
from typing import Dict, Iterable, List, Tuple

from app.infrastructure.db.mongo import init_mongo, db_ready
from app.repositories.classes_repo import iter_all_classes, update_schedule
from app.services.schedule_parser import normalize_schedule


def plan_changes(classes: Iterable[Dict]) -> Tuple[List[Tuple[str, str, str]], List[str]]:
    """Devuelve (cambios [(id, antes, después)], ids no interpretables)."""
    changes: List[Tuple[str, str, str]] = []
    unparsed: List[str] = []
    for c in classes:
        raw = (c.get("schedule") or "").strip()
        if not raw:
            continue
        canonical = normalize_schedule(raw)
        if not canonical:
            unparsed.append(c["id"])
        elif canonical != raw:
            changes.append((c["id"], raw, canonical))
    return changes, unparsed


def main() -> None:
    ap = argparse.ArgumentParser(description="Normaliza horarios de clases al formato canónico")
    ap.add_argument("--apply", action="store_true", help="Escribe los cambios en Mongo")
    args = ap.parse_args()

    init_mongo()
    if not db_ready():
        raise SystemExit("Mongo no accesible")

    changes, unparsed = plan_changes(iter_all_classes())
    for class_id, before, after in changes:
        print(f"{class_id}: {before!r} -> {after!r}")
        if args.apply:
            update_schedule(class_id, after)
    for class_id in unparsed:
        print(f"{class_id}: horario no interpretable, se omite")

    action = "aplicados" if args.apply else "propuestos"
    print(f"Cambios {action}: {len(changes)}; no interpretables: {len(unparsed)}")


if __name__ == "__main__":
    main()
