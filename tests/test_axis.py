from week_peek.axis import DayHeader, time_labels, day_headers
from week_peek.models import TimeSlotInterval
from week_peek.time_only import DayOfWeek, TimeOnly, WORK_WEEK_DAYS


def test_hourly_labels_include_end_hour():
    labels = time_labels(9, 17, TimeSlotInterval.SIXTY_MINUTES)
    assert [l.text for l in labels] == [f"{h:02d}:00" for h in range(9, 18)]
    assert [l.slot_index for l in labels] == list(range(9))


def test_sub_hour_labels_stop_at_end_hour():
    labels = time_labels(9, 10, TimeSlotInterval.THIRTY_MINUTES)
    assert [(l.text, l.slot_index) for l in labels] == [("09:00", 0), ("09:30", 1), ("10:00", 2)]


def test_quarter_hour_labels():
    labels = time_labels(8, 9, 15)
    assert [l.time for l in labels] == [
        TimeOnly(8, 0), TimeOnly(8, 15), TimeOnly(8, 30), TimeOnly(8, 45), TimeOnly(9, 0)
    ]


def test_single_hour_window():
    labels = time_labels(12, 12, TimeSlotInterval.FIFTEEN_MINUTES)
    assert [l.text for l in labels] == ["12:00"]


def test_day_headers_default_names():
    headers = day_headers(WORK_WEEK_DAYS)
    assert [h.name for h in headers] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert not any(h.is_zoomed for h in headers)


def test_day_headers_translations_and_zoom():
    days = [DayOfWeek.SATURDAY, DayOfWeek.MONDAY]
    headers = day_headers(days, {DayOfWeek.MONDAY: "Montag"}, zoomed_day=DayOfWeek.MONDAY)
    assert headers == [
        DayHeader(DayOfWeek.SATURDAY, "Saturday", False),
        DayHeader(DayOfWeek.MONDAY, "Montag", True),
    ]


def test_day_headers_accept_numeric_translation_keys():
    headers = day_headers([DayOfWeek.SUNDAY], {6: "Dimanche"})
    assert headers[0].name == "Dimanche"
