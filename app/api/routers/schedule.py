"""Utilidades sin estado expuestas por HTTP: parser de horarios y número de negocio."""
from dataclasses import asdict

from fastapi import APIRouter

from app.api.schemas.schedule import (
    BusinessNumberOut,
    BusinessNumberRequest,
    ScheduleEntryOut,
    ScheduleParseOut,
    ScheduleParseRequest,
    ScheduleSummaryOut,
)
from app.services.business_number import format_business_number, validate_business_number
from app.services.schedule_parser import build_schedule, parse_schedule, parse_schedule_multiple

router = APIRouter(tags=["Utilities"])


@router.post(
    "/schedule/parse",
    response_model=ScheduleParseOut,
    summary="Parsear horario",
    description="Convierte un horario en texto libre en entradas día/hora. Los segmentos no reconocidos se omiten.",
)
def parse(payload: ScheduleParseRequest) -> ScheduleParseOut:
    entries = parse_schedule_multiple(payload.schedule)
    summary = parse_schedule(payload.schedule)
    return ScheduleParseOut(
        entries=[ScheduleEntryOut(**e.to_dict()) for e in entries],
        summary=ScheduleSummaryOut(**asdict(summary)) if summary else None,
        normalized=build_schedule(entries),
    )


@router.post(
    "/business-number/validate",
    response_model=BusinessNumberOut,
    summary="Validar número de negocio",
)
def validate_business(payload: BusinessNumberRequest) -> BusinessNumberOut:
    check = validate_business_number(payload.value)
    return BusinessNumberOut(is_valid=check.is_valid, error=check.error, formatted=format_business_number(payload.value))
