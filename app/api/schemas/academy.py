"""
Esquemas Pydantic para academias y sus clases.

Convenciones:
- Campos en inglés y snake_case.
- Timestamps ISO-8601 UTC sellados en repositorios.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.api.schemas.schedule import ScheduleEntryOut


def _normalize_tags(v: List[str]) -> List[str]:
    uniq = []
    seen = set()
    for t in (v or []):
        tt = t.strip().lower()
        if tt and tt not in seen:
            seen.add(tt)
            uniq.append(tt)
    return uniq


class AcademyCreate(BaseModel):
    name: str = Field(min_length=1)
    subject: str
    description: Optional[str] = None
    address: Optional[str] = None
    target_grade: Optional[str] = None
    tags: List[str] = Field(default_factory=list)  # "subject:math", "grade:mid_1"...
    business_number: Optional[str] = None
    profile_image: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def _tags(cls, v: List[str]) -> List[str]:
        return _normalize_tags(v)


class AcademyOut(BaseModel):
    id: str
    name: str
    subject: str
    description: Optional[str] = None
    address: Optional[str] = None
    target_grade: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_mou: bool = False
    owner_id: Optional[str] = None
    business_number: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AcademyPageOut(BaseModel):
    items: List[AcademyOut]
    page: int
    page_size: int
    has_more: bool


class ClassCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    schedule: Optional[str] = None  # texto libre: "월/수/금 18:00~22:00"
    target_grade: Optional[str] = None
    fee: Optional[int] = Field(default=None, ge=0)
    is_recruiting: bool = True
    teacher_id: Optional[str] = None


class ClassOut(BaseModel):
    id: str
    academy_id: str
    name: str
    description: Optional[str] = None
    schedule: Optional[str] = None
    schedule_entries: List[ScheduleEntryOut] = Field(default_factory=list)
    target_grade: Optional[str] = None
    fee: Optional[int] = None
    is_recruiting: bool = True
    teacher_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ClassListOut(BaseModel):
    classes: List[ClassOut]
