import pytest

from app.services.business_number import (
    MSG_EMPTY,
    MSG_INVALID,
    MSG_LENGTH,
    extract_numbers,
    format_business_number,
    validate_business_number,
)
from app.services.pagination import page_bounds, paginate
from app.services.timetable_service import CLASS_COLORS, GRID_HOURS, build_timetable


# ---- número de negocio ----

def test_extract_and_format_progressively():
    assert extract_numbers("220-81-62517") == "2208162517"
    assert format_business_number("22") == "22"
    assert format_business_number("2208") == "220-8"
    assert format_business_number("2208162517") == "220-81-62517"
    assert format_business_number("220816251799") == "220-81-62517"


@pytest.mark.parametrize("value", ["220-81-62517", "1248100998"])
def test_valid_business_numbers(value):
    assert validate_business_number(value).is_valid


@pytest.mark.parametrize(
    "value,error",
    [("", MSG_EMPTY), ("abc", MSG_EMPTY), ("123-45", MSG_LENGTH), ("123-45-67890", MSG_INVALID)],
)
def test_invalid_business_numbers(value, error):
    check = validate_business_number(value)
    assert not check.is_valid
    assert check.error == error


# ---- paginación ----

def test_page_bounds():
    assert page_bounds(0) == (0, 20)
    assert page_bounds(2, 10) == (20, 30)
    with pytest.raises(ValueError):
        page_bounds(-1)


def test_paginate_reports_has_more_exactly():
    rows = [{"n": i} for i in range(25)]
    calls = []

    def fetch(skip, limit):
        calls.append((skip, limit))
        return rows[skip:skip + limit]

    first = paginate(fetch, 0, 10)
    assert [r["n"] for r in first.items] == list(range(10))
    assert first.has_more is True
    last = paginate(fetch, 2, 10)
    assert [r["n"] for r in last.items] == list(range(20, 25))
    assert last.has_more is False
    assert calls == [(0, 11), (20, 11)]


def test_paginate_full_last_page_has_no_more():
    rows = [{"n": i} for i in range(20)]
    page = paginate(lambda skip, limit: rows[skip:skip + limit], 1, 10)
    assert len(page.items) == 10
    assert page.has_more is False


# ---- grilla semanal ----

def _enrollment(class_id, name, schedule, academy="수학나라"):
    return {"class_id": class_id, "class": {"id": class_id, "name": name, "schedule": schedule, "academy": {"id": "a1", "name": academy}}}


def test_timetable_blocks_and_colors():
    grid = build_timetable([
        _enrollment("c1", "중2 수학", "월/수 18:00~20:00"),
        _enrollment("c2", "영어 회화", "화 17:00~18:30"),
    ])
    assert grid["days"] == ["월", "화", "수", "목", "금", "토", "일"]
    assert grid["hours"] == GRID_HOURS
    assert [(b["day"], b["class_id"]) for b in grid["blocks"]] == [("월", "c1"), ("화", "c2"), ("수", "c1")]
    colors = {b["class_id"]: b["color"] for b in grid["blocks"]}
    assert colors == {"c1": CLASS_COLORS[0], "c2": CLASS_COLORS[1]}
    assert grid["blocks"][1]["end_time"] == "18:30"
    assert grid["unparsed"] == []


def test_timetable_reports_unparsed_and_missing_classes():
    grid = build_timetable([
        _enrollment("c1", "논술", "협의"),
        {"class_id": "gone", "class": None},
    ])
    assert grid["blocks"] == []
    assert grid["unparsed"] == ["c1", "gone"]
