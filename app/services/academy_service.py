"""Servicios de academias: listado paginado, detalle y alta por el dueño."""
from typing import Dict, Any, Optional

from app.repositories.academies_repo import (
    insert_academy as _insert_academy,
    get_academy as _get_academy,
    list_academies as _list_academies,
)
from app.services.business_number import format_business_number, validate_business_number
from app.services.pagination import Page, paginate


def list_academies(page: int, page_size: int, subject: Optional[str] = None, q: Optional[str] = None) -> Page:
    """Página de academias con `has_more` exacto."""
    return paginate(lambda skip, limit: _list_academies(skip, limit, subject=subject, q=q), page, page_size)


def get_academy(academy_id: str) -> Dict[str, Any]:
    doc = _get_academy(academy_id)
    if not doc:
        raise LookupError("Academia no encontrada")
    return doc


def create_academy(owner_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
    """Crea la academia del usuario; valida y normaliza el número de negocio si viene."""
    data = dict(doc)
    raw = data.get("business_number")
    if raw:
        check = validate_business_number(raw)
        if not check.is_valid:
            raise ValueError(check.error)
        data["business_number"] = format_business_number(raw)
    else:
        data["business_number"] = None
    data["owner_id"] = str(owner_id)
    return _insert_academy(data)
