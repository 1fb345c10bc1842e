from app.services.schedule_parser import (
    DAYS,
    ParsedSchedule,
    ScheduleEntry,
    build_schedule,
    format_parsed_schedule,
    normalize_schedule,
    parse_schedule,
    parse_schedule_multiple,
)


def _days(entries):
    return [e.day for e in entries]


def test_empty_and_none_yield_no_entries():
    assert parse_schedule_multiple(None) == []
    assert parse_schedule_multiple("") == []
    assert parse_schedule_multiple("  ,  , ") == []


def test_single_day_clause():
    assert parse_schedule_multiple("월 18:00~20:00") == [ScheduleEntry("월", 18, 0, 20, 0)]


def test_multiple_clauses_keep_input_order():
    entries = parse_schedule_multiple("월 18:00~20:00, 수 19:00~21:00")
    assert entries == [
        ScheduleEntry("월", 18, 0, 20, 0),
        ScheduleEntry("수", 19, 0, 21, 0),
    ]


def test_slash_separated_days_share_time():
    entries = parse_schedule_multiple("월/수/금 18:00~22:00")
    assert _days(entries) == ["월", "수", "금"]
    assert all((e.start_hour, e.end_hour) == (18, 22) for e in entries)


def test_run_of_days_without_separator_matches_slash_form():
    assert parse_schedule_multiple("월수금 18:00~22:00") == parse_schedule_multiple("월/수/금 18:00~22:00")


def test_time_without_day_is_dropped():
    assert parse_schedule_multiple("18:00~20:00") == []


def test_dash_separator_equals_tilde():
    assert parse_schedule_multiple("월 18:00-20:00") == parse_schedule_multiple("월 18:00~20:00")


def test_whitespace_and_single_digit_hours():
    assert parse_schedule_multiple("화9:30 ~ 11:00") == [ScheduleEntry("화", 9, 30, 11, 0)]


def test_malformed_segments_are_skipped_not_raised():
    entries = parse_schedule_multiple("월 18:00~20:00, 아무때나, 목 10:00~12:00")
    assert _days(entries) == ["월", "목"]


def test_mixed_clause_kinds():
    entries = parse_schedule_multiple("화/목 17:00~20:00, 토 10:00~13:00")
    assert _days(entries) == ["화", "목", "토"]
    assert entries[-1] == ScheduleEntry("토", 10, 0, 13, 0)


def test_prefixed_clause_falls_back_to_multi_day_match():
    assert parse_schedule_multiple("매주 월/수 18:00~20:00") == [
        ScheduleEntry("월", 18, 0, 20, 0),
        ScheduleEntry("수", 18, 0, 20, 0),
    ]


def test_out_of_range_values_are_not_validated():
    assert parse_schedule_multiple("일 25:00~26:99") == [ScheduleEntry("일", 25, 0, 26, 99)]


def test_parsing_is_idempotent():
    text = "월/수/금 18:00~22:00, 토 09:00~12:00"
    assert parse_schedule_multiple(text) == parse_schedule_multiple(text)


def test_legacy_summary_uses_first_entry_time():
    summary = parse_schedule("월 18:00~20:00, 수 19:00~21:00")
    assert summary == ParsedSchedule(days=["월", "수"], start_hour=18, start_minute=0, end_hour=20, end_minute=0)


def test_legacy_summary_none_when_nothing_parses():
    assert parse_schedule(None) is None
    assert parse_schedule("협의 후 결정") is None


def test_legacy_summary_round_trip():
    for text in ("월/수/금 18:00~22:00", "화목 17:30~20:00", "월 18:00~20:00, 금 18:00~20:00"):
        summary = parse_schedule(text)
        assert parse_schedule(format_parsed_schedule(summary)) == summary


def test_format_parsed_schedule_pads_times():
    parsed = ParsedSchedule(days=["화", "목"], start_hour=9, start_minute=5, end_hour=11, end_minute=0)
    assert format_parsed_schedule(parsed) == "화/목 09:05~11:00"
    assert format_parsed_schedule(None) == ""


def test_build_schedule_orders_by_weekday():
    entries = [
        ScheduleEntry("금", 18, 0, 20, 0),
        ScheduleEntry("월", 9, 0, 10, 30),
        ScheduleEntry("수", 19, 0, 21, 0),
    ]
    assert build_schedule(entries) == "월 09:00~10:30, 수 19:00~21:00, 금 18:00~20:00"
    assert build_schedule([]) == ""


def test_build_schedule_puts_unknown_day_tokens_last():
    entries = [
        ScheduleEntry("월화", 18, 0, 20, 0),
        ScheduleEntry("수", 19, 0, 21, 0),
        ScheduleEntry("월", 9, 0, 10, 0),
    ]
    assert build_schedule(entries) == "월 09:00~10:00, 수 19:00~21:00, 월화 18:00~20:00"


def test_normalize_expands_multi_day_clause():
    assert normalize_schedule("금/월 18:00-22:00") == "월 18:00~22:00, 금 18:00~22:00"
    assert normalize_schedule("미정") == ""


def test_day_alphabet_is_monday_first():
    assert DAYS == ("월", "화", "수", "목", "금", "토", "일")
