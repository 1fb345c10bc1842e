"""
Reservas de consulta (visita) de padres a academias.

Estados: pending -> confirmed -> completed; `cancelled` es terminal.
- El padre crea, lista y cancela las suyas (pending o confirmed).
- El dueño de la academia ve su agenda y avanza el estado.
"""
import logging
from typing import Dict, Any, List

from app.repositories.academies_repo import (
    get_academy as _get_academy,
    get_academies_by_ids as _get_academies_by_ids,
)
from app.repositories.reservations_repo import (
    insert_reservation as _insert_reservation,
    get_reservation as _get_reservation,
    list_by_parent as _list_by_parent,
    list_by_academy as _list_by_academy,
    update_status as _update_status,
)

_log = logging.getLogger("academy.reservations")

STATUSES = ("pending", "confirmed", "completed", "cancelled")

# Transiciones permitidas al dueño (confirmar / rechazar / completar)
OWNER_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"completed"},
}
PARENT_CANCELLABLE = {"pending", "confirmed"}


def _owned_academy(owner_id: str, academy_id: str) -> Dict[str, Any]:
    academy = _get_academy(academy_id)
    if not academy:
        raise LookupError("Academia no encontrada")
    if academy.get("owner_id") != str(owner_id):
        raise PermissionError("Solo el dueño de la academia puede gestionar sus reservas")
    return academy


def create_reservation(parent_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
    if not _get_academy(doc["academy_id"]):
        raise LookupError("Academia no encontrada")
    data = {**doc, "parent_id": str(parent_id), "status": "pending"}
    return _insert_reservation(data)


def list_my_reservations(parent_id: str) -> List[Dict[str, Any]]:
    """Reservas del padre con la academia embebida (id + nombre); None si fue borrada."""
    reservations = _list_by_parent(parent_id)
    academies = _get_academies_by_ids([r["academy_id"] for r in reservations])
    out: List[Dict[str, Any]] = []
    for r in reservations:
        academy = academies.get(r["academy_id"])
        out.append({**r, "academy": {"id": academy["id"], "name": academy.get("name")} if academy else None})
    return out


def cancel_reservation(parent_id: str, reservation_id: str) -> Dict[str, Any]:
    reservation = _get_reservation(reservation_id)
    if not reservation or reservation.get("parent_id") != str(parent_id):
        raise LookupError("Reserva no encontrada")
    if reservation.get("status") == "cancelled":
        return reservation
    if reservation.get("status") not in PARENT_CANCELLABLE:
        raise ValueError("La reserva ya fue completada")
    return _update_status(reservation_id, "cancelled") or reservation


def list_academy_reservations(owner_id: str, academy_id: str) -> List[Dict[str, Any]]:
    _owned_academy(owner_id, academy_id)
    return _list_by_academy(academy_id)


def update_reservation_status(owner_id: str, reservation_id: str, status: str) -> Dict[str, Any]:
    """Avanza el estado según `OWNER_TRANSITIONS`; ValueError si el salto no es válido."""
    if status not in STATUSES:
        raise ValueError(f"Estado desconocido: {status}")
    reservation = _get_reservation(reservation_id)
    if not reservation:
        raise LookupError("Reserva no encontrada")
    _owned_academy(owner_id, reservation["academy_id"])
    current = reservation.get("status")
    if status not in OWNER_TRANSITIONS.get(current, set()):
        raise ValueError(f"No se puede pasar de '{current}' a '{status}'")
    updated = _update_status(reservation_id, status)
    if not updated:
        raise LookupError("Reserva no encontrada")
    _log.info("reservation %s: %s -> %s", reservation_id, current, status)
    return updated
