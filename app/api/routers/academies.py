"""Endpoints de academias y sus clases."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import CurrentUser, get_current_user
from app.api.schemas.academy import (
    AcademyCreate,
    AcademyOut,
    AcademyPageOut,
    ClassCreate,
    ClassListOut,
    ClassOut,
)
from app.core.config import settings
from app.services.academy_service import create_academy, get_academy, list_academies
from app.services.class_service import create_class, list_classes

router = APIRouter(prefix="/academies", tags=["Academies"])


@router.get(
    "",
    response_model=AcademyPageOut,
    summary="Listar academias",
    description="Lista paginada (página 0..n) con `has_more` para scroll infinito.",
)
def get_academies(
    page: int = Query(default=0, ge=0),
    page_size: Optional[int] = Query(default=None, ge=1),
    subject: Optional[str] = Query(default=None, description="Materia principal (p.ej., 수학)"),
    q: Optional[str] = Query(default=None, description="Búsqueda por nombre"),
) -> AcademyPageOut:
    try:
        result = list_academies(page, settings.clamp_page_size(page_size), subject=subject, q=q)
        return AcademyPageOut(
            items=[AcademyOut(**i) for i in result.items],
            page=result.page,
            page_size=result.page_size,
            has_more=result.has_more,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudieron listar las academias: {e}")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AcademyOut,
    summary="Crear academia",
    description="Crea una academia cuyo dueño es el usuario autenticado.",
)
def post_academy(payload: AcademyCreate, user: CurrentUser = Depends(get_current_user)) -> AcademyOut:
    try:
        doc = create_academy(user.id, payload.model_dump(mode="json"))
        return AcademyOut(**doc)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo crear la academia: {e}")


@router.get("/{academy_id}", response_model=AcademyOut, summary="Detalle de academia")
def get_one(academy_id: str) -> AcademyOut:
    try:
        return AcademyOut(**get_academy(academy_id))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo obtener la academia: {e}")


@router.get(
    "/{academy_id}/classes",
    response_model=ClassListOut,
    summary="Clases de la academia",
    description="Incluye `schedule_entries` parseadas desde el texto de horario.",
)
def get_classes(academy_id: str) -> ClassListOut:
    try:
        return ClassListOut(classes=[ClassOut(**c) for c in list_classes(academy_id)])
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudieron listar las clases: {e}")


@router.post(
    "/{academy_id}/classes",
    status_code=status.HTTP_201_CREATED,
    response_model=ClassOut,
    summary="Crear clase",
)
def post_class(academy_id: str, payload: ClassCreate, user: CurrentUser = Depends(get_current_user)) -> ClassOut:
    try:
        return ClassOut(**create_class(user.id, academy_id, payload.model_dump(mode="json")))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo crear la clase: {e}")
