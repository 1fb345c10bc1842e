"""Esquemas de reservas de consulta."""
from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from app.api.schemas.enrollment import AcademyRef


class ReservationCreate(BaseModel):
    academy_id: str
    student_name: str = Field(min_length=1)
    student_grade: Optional[str] = None
    reservation_date: date
    reservation_time: str = Field(pattern=r"^\d{2}:\d{2}$", examples=["15:30"])
    message: Optional[str] = None

    @field_validator("reservation_time")
    @classmethod
    def _time(cls, v: str) -> str:
        hh, mm = (int(x) for x in v.split(":"))
        if hh > 23 or mm > 59:
            raise ValueError("Hora inválida (HH:MM)")
        return v


class ReservationOut(BaseModel):
    id: str
    academy_id: str
    parent_id: str
    student_name: str
    student_grade: Optional[str] = None
    reservation_date: str
    reservation_time: str
    message: Optional[str] = None
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    academy: Optional[AcademyRef] = None


class ReservationListOut(BaseModel):
    reservations: List[ReservationOut]


class ReservationStatusUpdate(BaseModel):
    status: Literal["confirmed", "completed", "cancelled"]
