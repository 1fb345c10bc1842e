"""
Esquemas Pydantic para el parser de horarios y el número de negocio.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class ScheduleEntryOut(BaseModel):
    day: str
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int


class ScheduleSummaryOut(BaseModel):
    days: List[str]
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int


class ScheduleParseRequest(BaseModel):
    schedule: Optional[str] = Field(default=None, description='Texto libre, p.ej. "월/수/금 18:00~22:00"')


class ScheduleParseOut(BaseModel):
    entries: List[ScheduleEntryOut]
    summary: Optional[ScheduleSummaryOut] = None
    normalized: str


class BusinessNumberRequest(BaseModel):
    value: str = ""


class BusinessNumberOut(BaseModel):
    is_valid: bool
    error: Optional[str] = None
    formatted: str
