"""Endpoints de bookmarks de academias."""
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import CurrentUser, get_current_user
from app.api.schemas.enrollment import (
    BookmarkedAcademyOut,
    BookmarkedOut,
    BookmarkListOut,
    BookmarkToggleRequest,
)
from app.services.bookmark_service import list_bookmarked_academies, toggle_bookmark

router = APIRouter(prefix="/bookmarks", tags=["Bookmarks"])


@router.get(
    "",
    response_model=BookmarkListOut,
    summary="Academias guardadas",
    description="Más recientes primero; las academias borradas no aparecen.",
)
def get_bookmarks(user: CurrentUser = Depends(get_current_user)) -> BookmarkListOut:
    try:
        items = list_bookmarked_academies(user.id)
        return BookmarkListOut(academies=[BookmarkedAcademyOut(**i) for i in items])
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudieron listar los guardados: {e}")


@router.post("/toggle", response_model=BookmarkedOut, summary="Guardar / quitar academia")
def post_toggle(payload: BookmarkToggleRequest, user: CurrentUser = Depends(get_current_user)) -> BookmarkedOut:
    try:
        return BookmarkedOut(bookmarked=toggle_bookmark(user.id, payload.academy_id))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo actualizar el guardado: {e}")
