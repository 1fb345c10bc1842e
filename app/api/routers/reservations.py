"""
Endpoints de reservas de consulta.

- Padre: crear, listar las propias y cancelar.
- Dueño de la academia: ver la agenda y confirmar / rechazar / completar.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import CurrentUser, get_current_user
from app.api.schemas.reservation import (
    ReservationCreate,
    ReservationListOut,
    ReservationOut,
    ReservationStatusUpdate,
)
from app.services.reservation_service import (
    cancel_reservation,
    create_reservation,
    list_academy_reservations,
    list_my_reservations,
    update_reservation_status,
)

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ReservationOut, summary="Reservar consulta")
def post_reservation(payload: ReservationCreate, user: CurrentUser = Depends(get_current_user)) -> ReservationOut:
    try:
        return ReservationOut(**create_reservation(user.id, payload.model_dump(mode="json")))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo crear la reserva: {e}")


@router.get("", response_model=ReservationListOut, summary="Mis reservas")
def get_my_reservations(user: CurrentUser = Depends(get_current_user)) -> ReservationListOut:
    try:
        return ReservationListOut(reservations=[ReservationOut(**r) for r in list_my_reservations(user.id)])
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudieron listar las reservas: {e}")


@router.post("/{reservation_id}/cancel", response_model=ReservationOut, summary="Cancelar mi reserva")
def post_cancel(reservation_id: str, user: CurrentUser = Depends(get_current_user)) -> ReservationOut:
    try:
        return ReservationOut(**cancel_reservation(user.id, reservation_id))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo cancelar la reserva: {e}")


@router.get(
    "/academy/{academy_id}",
    response_model=ReservationListOut,
    summary="Agenda de la academia",
    description="Solo el dueño; orden cronológico por fecha y hora.",
)
def get_academy_reservations(academy_id: str, user: CurrentUser = Depends(get_current_user)) -> ReservationListOut:
    try:
        items = list_academy_reservations(user.id, academy_id)
        return ReservationListOut(reservations=[ReservationOut(**r) for r in items])
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo listar la agenda: {e}")


@router.patch("/{reservation_id}/status", response_model=ReservationOut, summary="Cambiar estado (dueño)")
def patch_status(
    reservation_id: str,
    payload: ReservationStatusUpdate,
    user: CurrentUser = Depends(get_current_user),
) -> ReservationOut:
    try:
        return ReservationOut(**update_reservation_status(user.id, reservation_id, payload.status))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo actualizar la reserva: {e}")
