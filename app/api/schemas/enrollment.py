"""Esquemas de inscripciones, grilla semanal y bookmarks."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.api.schemas.academy import AcademyOut


class AcademyRef(BaseModel):
    id: str
    name: Optional[str] = None


class EnrolledClass(BaseModel):
    id: str
    name: str
    schedule: Optional[str] = None
    target_grade: Optional[str] = None
    fee: Optional[int] = None
    is_recruiting: Optional[bool] = None
    academy: Optional[AcademyRef] = None


class EnrollmentOut(BaseModel):
    id: str
    class_id: str
    created_at: Optional[str] = None
    # `class` es palabra reservada en Python
    class_: Optional[EnrolledClass] = Field(default=None, alias="class")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_doc(cls, doc: dict) -> "EnrollmentOut":
        return cls(
            id=doc["id"],
            class_id=doc["class_id"],
            created_at=doc.get("created_at"),
            class_=EnrolledClass(**doc["class"]) if doc.get("class") else None,
        )


class EnrollmentListOut(BaseModel):
    enrollments: List[EnrollmentOut]


class EnrollRequest(BaseModel):
    class_id: str


class EnrolledOut(BaseModel):
    enrolled: bool


class TimetableBlock(BaseModel):
    class_id: str
    class_name: str
    academy_name: Optional[str] = None
    day: str
    day_index: int
    start_time: str
    end_time: str
    color: str


class TimetableOut(BaseModel):
    days: List[str]
    hours: List[int]
    blocks: List[TimetableBlock]
    unparsed: List[str]


class BookmarkToggleRequest(BaseModel):
    academy_id: str


class BookmarkedOut(BaseModel):
    bookmarked: bool


class BookmarkedAcademyOut(AcademyOut):
    bookmarked_at: Optional[str] = None


class BookmarkListOut(BaseModel):
    academies: List[BookmarkedAcademyOut]
