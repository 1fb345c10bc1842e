"""Parser de horarios semanales en texto libre (p.ej. "월/수/금 18:00~22:00").

Convención del texto:
- Cláusulas separadas por coma: "월 18:00~20:00, 수 19:00~21:00".
- Días: un símbolo, lista con "/" ("월/수/금") o racha sin separador ("월수금").
- Rango de horas "H:MM~HH:MM"; también acepta "-" como separador.

Funciones puras: sin I/O ni estado. Los segmentos que no encajan se omiten
en silencio (no se lanza error); quien necesite detectarlos compara contra
la salida vacía.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional


# Orden lunes..domingo
DAYS: tuple[str, ...] = ("월", "화", "수", "목", "금", "토", "일")
DAY_INDEX = {d: i for i, d in enumerate(DAYS)}

_DAY_CLASS = "[" + "".join(DAYS) + "]"
_TIME_RANGE = r"\s*(\d{1,2}):(\d{2})\s*[~\-]\s*(\d{1,2}):(\d{2})"

# Un único día al inicio del segmento
SINGLE_DAY_RE = re.compile(rf"({_DAY_CLASS}){_TIME_RANGE}")
# Racha de días y/o "/" seguida del rango
MULTI_DAY_RE = re.compile(rf"((?:{_DAY_CLASS}|/)+){_TIME_RANGE}")


@dataclass(frozen=True)
class ScheduleEntry:
    day: str
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    @property
    def start_time(self) -> str:
        return f"{self.start_hour:02d}:{self.start_minute:02d}"

    @property
    def end_time(self) -> str:
        return f"{self.end_hour:02d}:{self.end_minute:02d}"

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "start_hour": self.start_hour,
            "start_minute": self.start_minute,
            "end_hour": self.end_hour,
            "end_minute": self.end_minute,
        }


@dataclass(frozen=True)
class ParsedSchedule:
    """Resumen legado: varios días con un único rango compartido."""
    days: List[str] = field(default_factory=list)
    start_hour: int = 0
    start_minute: int = 0
    end_hour: int = 0
    end_minute: int = 0


def _split_days(day_spec: str) -> List[str]:
    if "/" in day_spec:
        return [d for d in day_spec.split("/") if d]
    return [c for c in day_spec if c in DAY_INDEX]


def _times(m: re.Match) -> tuple[int, int, int, int]:
    return int(m.group(2)), int(m.group(3)), int(m.group(4)), int(m.group(5))


def _parse_segment(segment: str) -> List[ScheduleEntry]:
    m = SINGLE_DAY_RE.match(segment)
    if m:
        return [ScheduleEntry(m.group(1), *_times(m))]

    m = MULTI_DAY_RE.search(segment)
    if m:
        sh, sm, eh, em = _times(m)
        return [ScheduleEntry(d, sh, sm, eh, em) for d in _split_days(m.group(1))]

    return []


def parse_schedule_multiple(schedule: Optional[str]) -> List[ScheduleEntry]:
    """Convierte un texto de horario en entradas (día + rango) en orden textual.

    Entrada vacía o None devuelve []. Nunca lanza excepción.
    """
    if not schedule:
        return []
    entries: List[ScheduleEntry] = []
    for part in schedule.split(","):
        part = part.strip()
        if not part:
            continue
        entries.extend(_parse_segment(part))
    return entries


def parse_schedule(schedule: Optional[str]) -> Optional[ParsedSchedule]:
    """Resumen legado: todos los días + el rango de la PRIMERA entrada.

    Con rangos distintos por día la información se pierde; se conserva así
    por compatibilidad con los consumidores existentes.
    """
    entries = parse_schedule_multiple(schedule)
    if not entries:
        return None
    first = entries[0]
    return ParsedSchedule(
        days=[e.day for e in entries],
        start_hour=first.start_hour,
        start_minute=first.start_minute,
        end_hour=first.end_hour,
        end_minute=first.end_minute,
    )


def format_parsed_schedule(parsed: Optional[ParsedSchedule]) -> str:
    """Reconstruye la cláusula multi-día ("월/수/금 18:00~22:00") de un resumen."""
    if not parsed or not parsed.days:
        return ""
    return (
        f"{'/'.join(parsed.days)} "
        f"{parsed.start_hour:02d}:{parsed.start_minute:02d}~{parsed.end_hour:02d}:{parsed.end_minute:02d}"
    )


def build_schedule(entries: Iterable[ScheduleEntry]) -> str:
    """Texto canónico "월 18:00~20:00, 수 19:00~21:00" ordenado por día de la semana."""
    valid = [e for e in entries if e.day]
    # sort estable; días fuera del alfabeto van al final
    valid.sort(key=lambda e: DAY_INDEX.get(e.day, len(DAYS)))
    return ", ".join(f"{e.day} {e.start_time}~{e.end_time}" for e in valid)


def normalize_schedule(schedule: Optional[str]) -> str:
    """Atajo parse + build. Devuelve "" si nada se pudo interpretar."""
    return build_schedule(parse_schedule_multiple(schedule))
