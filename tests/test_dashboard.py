from datetime import date

from medoffice.calendar.dashboard import summarize


def test_summary_counts(appt):
    appointments = [
        appt("2024-12-22", "11:15", status="pending", id="d"),
        appt("2024-12-20", "10:30", id="b"),
        appt("2024-12-20", "09:00", id="a"),
        appt("2024-12-21", "14:00", status="pending", id="c"),
        appt("2024-11-29", "09:00", status="pending", id="old"),
    ]

    summary = summarize(appointments, date(2024, 12, 20), total_patients=3)

    assert summary.todays_appointments == 2
    assert summary.this_week_appointments == 3
    assert summary.this_month_appointments == 4
    assert summary.pending_this_month == 2
    assert summary.total_patients == 3
    assert [a.id for a in summary.upcoming] == ["a", "b", "c", "d"]


def test_upcoming_skips_cancelled_and_respects_limit(appt):
    appointments = [
        appt("2024-12-20", "09:00", status="cancelled", id="x"),
        appt("2024-12-21", "09:00", id="y"),
        appt("2024-12-22", "09:00", id="z"),
    ]

    summary = summarize(appointments, date(2024, 12, 20), upcoming_limit=1)

    assert [a.id for a in summary.upcoming] == ["y"]
    assert summary.todays_appointments == 1
