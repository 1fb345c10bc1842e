"""Paginación por número de página (contraparte del scroll infinito del cliente).

El cliente pide página 0, 1, 2... hasta que `has_more` sea False.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

DEFAULT_PAGE_SIZE = 20


@dataclass
class Page:
    items: List[Dict[str, Any]] = field(default_factory=list)
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    has_more: bool = False


def page_bounds(page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Tuple[int, int]:
    """Rango semiabierto [inicio, fin) de filas para la página."""
    if page < 0:
        raise ValueError("page must be >= 0")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    start = page * page_size
    return start, start + page_size


def paginate(
    fetch: Callable[[int, int], List[Dict[str, Any]]],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Ejecuta `fetch(skip, limit)` pidiendo una fila extra para saber si hay más."""
    start, stop = page_bounds(page, page_size)
    rows = list(fetch(start, page_size + 1))
    return Page(
        items=rows[:page_size],
        page=page,
        page_size=page_size,
        has_more=len(rows) > page_size,
    )
