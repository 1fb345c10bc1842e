"""
Endpoints de inscripciones a clases y grilla semanal del usuario autenticado.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import CurrentUser, get_current_user
from app.api.schemas.enrollment import (
    EnrolledOut,
    EnrollmentListOut,
    EnrollmentOut,
    EnrollRequest,
    TimetableOut,
)
from app.services.enrollment_service import enroll, get_timetable, is_enrolled, list_enrollments, unenroll

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get("", response_model=EnrollmentListOut, summary="Mis inscripciones")
def get_enrollments(user: CurrentUser = Depends(get_current_user)) -> EnrollmentListOut:
    try:
        return EnrollmentListOut(enrollments=[EnrollmentOut.from_doc(d) for d in list_enrollments(user.id)])
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudieron listar las inscripciones: {e}")


@router.get(
    "/timetable",
    response_model=TimetableOut,
    summary="Grilla semanal",
    description="Bloques día/hora de las clases inscritas; `unparsed` lista clases con horario no interpretable.",
)
def get_my_timetable(user: CurrentUser = Depends(get_current_user)) -> TimetableOut:
    try:
        return TimetableOut(**get_timetable(user.id))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo armar el horario: {e}")


@router.get("/check/{class_id}", response_model=EnrolledOut, summary="¿Inscrito en la clase?")
def check(class_id: str, user: CurrentUser = Depends(get_current_user)) -> EnrolledOut:
    try:
        return EnrolledOut(enrolled=is_enrolled(user.id, class_id))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo verificar la inscripción: {e}")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EnrolledOut, summary="Inscribirse")
def post_enrollment(payload: EnrollRequest, user: CurrentUser = Depends(get_current_user)) -> EnrolledOut:
    try:
        return EnrolledOut(enrolled=enroll(user.id, payload.class_id))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo inscribir: {e}")


@router.delete("/{class_id}", response_model=EnrolledOut, summary="Cancelar inscripción")
def delete_enrollment(class_id: str, user: CurrentUser = Depends(get_current_user)) -> EnrolledOut:
    try:
        unenroll(user.id, class_id)
        return EnrolledOut(enrolled=False)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"No se pudo cancelar la inscripción: {e}")
