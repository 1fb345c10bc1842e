from scripts.normalize_class_schedules import plan_changes


def test_plan_changes_reports_rewrites_and_unparsed():
    classes = [
        {"id": "c1", "schedule": "월/수 18:00-20:00"},
        {"id": "c2", "schedule": "화 17:00~19:00"},
        {"id": "c3", "schedule": "시간 협의"},
        {"id": "c4", "schedule": None},
    ]
    changes, unparsed = plan_changes(classes)
    assert changes == [("c1", "월/수 18:00-20:00", "월 18:00~20:00, 수 18:00~20:00")]
    assert unparsed == ["c3"]
