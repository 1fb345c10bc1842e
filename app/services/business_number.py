"""Número de registro de negocio coreano (사업자등록번호): formato y checksum.

Formato: XXX-XX-XXXXX (10 dígitos). El último dígito es de control.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_WEIGHTS = (1, 3, 7, 1, 3, 7, 1, 3, 5)

MSG_EMPTY = "사업자등록번호를 입력해주세요"
MSG_LENGTH = "사업자등록번호는 10자리입니다"
MSG_INVALID = "유효하지 않은 사업자등록번호입니다"


@dataclass(frozen=True)
class BusinessNumberCheck:
    is_valid: bool
    error: Optional[str] = None


def extract_numbers(value: Optional[str]) -> str:
    return re.sub(r"[^0-9]", "", value or "")


def format_business_number(value: Optional[str]) -> str:
    """Formatea progresivamente mientras se escribe: XXX, XXX-XX, XXX-XX-XXXXX."""
    n = extract_numbers(value)
    if len(n) <= 3:
        return n
    if len(n) <= 5:
        return f"{n[:3]}-{n[3:]}"
    return f"{n[:3]}-{n[3:5]}-{n[5:10]}"


def _check_digit(digits: list[int]) -> int:
    total = sum(d * w for d, w in zip(digits[:9], _WEIGHTS))
    # el noveno dígito suma además la decena de (d9 * 5)
    total += (digits[8] * 5) // 10
    return (10 - total % 10) % 10


def validate_business_number(value: Optional[str]) -> BusinessNumberCheck:
    n = extract_numbers(value)
    if not n:
        return BusinessNumberCheck(False, MSG_EMPTY)
    if len(n) != 10:
        return BusinessNumberCheck(False, MSG_LENGTH)
    digits = [int(c) for c in n]
    if _check_digit(digits) != digits[9]:
        return BusinessNumberCheck(False, MSG_INVALID)
    return BusinessNumberCheck(True)
