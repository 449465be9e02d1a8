import pytest

from jsonld import build_opening_hours, group_consecutive_days
from models import DayHours, Weekday, WeeklyHours

ALL_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _days(spec):
    day_of_week = spec["dayOfWeek"]
    return [day_of_week] if isinstance(day_of_week, str) else list(day_of_week)


def test_consecutive_days_are_merged(nine_to_five):
    specs = build_opening_hours(
        {
            "openingHours": {
                "monday": nine_to_five,
                "tuesday": nine_to_five,
                "wednesday": nine_to_five,
            }
        }
    )

    assert specs == [
        {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ["Monday", "Tuesday", "Wednesday"],
            "opens": "09:00",
            "closes": "17:00",
        }
    ]


def test_non_consecutive_days_stay_separate(nine_to_five):
    specs = build_opening_hours(
        {"openingHours": {"monday": nine_to_five, "wednesday": nine_to_five}}
    )

    assert len(specs) == 2
    assert specs[0]["dayOfWeek"] == "Monday"
    assert specs[1]["dayOfWeek"] == "Wednesday"


def test_sunday_and_monday_are_not_merged(nine_to_five):
    specs = build_opening_hours(
        {"openingHours": {"sunday": nine_to_five, "monday": nine_to_five}}
    )

    assert [spec["dayOfWeek"] for spec in specs] == ["Monday", "Sunday"]


def test_all_week_identical_gives_single_spec(nine_to_five):
    specs = build_opening_hours(
        {"openingHours": {day.lower(): nine_to_five for day in ALL_DAYS}}
    )

    assert len(specs) == 1
    assert specs[0]["dayOfWeek"] == ALL_DAYS


def test_open_24_hours_overrides_day_map(nine_to_five):
    specs = build_opening_hours(
        {"open24Hours": True, "openingHours": {"monday": nine_to_five}}
    )

    assert specs == [
        {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ALL_DAYS,
            "opens": "00:00",
            "closes": "23:59",
        }
    ]


@pytest.mark.parametrize("day_map", [{}, None, "closed", {"holiday": {"open": "10:00"}}])
def test_no_signed_days_gives_empty_list(day_map):
    assert build_opening_hours({"openingHours": day_map}) == []


def test_empty_field_map_gives_empty_list():
    assert build_opening_hours({}) == []


@pytest.mark.parametrize(
    "day_map",
    [
        {"monday": {"open": "09:00", "close": "17:00"}, "friday": {"open": "09:00", "close": "17:00"}},
        {
            "monday": {"open": "08:00", "close": "12:00"},
            "tuesday": {"open": "08:00", "close": "12:00"},
            "wednesday": {"open": "10:00", "close": "18:00"},
            "thursday": {"open": "08:00", "close": "12:00"},
            "saturday": {"open": "10:00", "close": "14:00"},
            "sunday": {"open": "10:00", "close": "14:00"},
        },
        {day.lower(): {"open": f"0{i}:00", "close": "18:00"} for i, day in enumerate(ALL_DAYS)},
    ],
)
def test_groups_partition_input_days(day_map):
    specs = build_opening_hours({"openingHours": day_map})

    emitted = [day for spec in specs for day in _days(spec)]
    expected = {day.capitalize() for day in day_map}

    assert len(emitted) == len(set(emitted))
    assert set(emitted) == expected


def test_groups_follow_canonical_order():
    day_map = {
        "saturday": {"open": "10:00", "close": "14:00"},
        "monday": {"open": "09:00", "close": "17:00"},
        "tuesday": {"open": "09:00", "close": "17:00"},
        "thursday": {"open": "09:00", "close": "17:00"},
    }

    groups = group_consecutive_days(WeeklyHours.from_day_map(day_map))

    assert [group.days for group in groups] == [
        [Weekday.MONDAY, Weekday.TUESDAY],
        [Weekday.THURSDAY],
        [Weekday.SATURDAY],
    ]


def test_day_aliases_and_text_entries():
    specs = build_opening_hours(
        {
            "openingHours": {
                "Mon": "9:00-17:00",
                "tues": "09:00 - 17:00",
                "Wed": "9-17",
                "thu": "closed",
            }
        }
    )

    assert specs == [
        {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ["Monday", "Tuesday", "Wednesday"],
            "opens": "09:00",
            "closes": "17:00",
        }
    ]


def test_missing_close_is_omitted_from_spec():
    specs = build_opening_hours({"openingHours": {"friday": {"open": "10:00"}}})

    assert specs == [
        {"@type": "OpeningHoursSpecification", "dayOfWeek": "Friday", "opens": "10:00"}
    ]


def test_day_hours_parses_always_open_text():
    assert DayHours.from_entry("24/7") == DayHours(open="00:00", close="23:59")


def test_day_hours_rejects_out_of_range_text():
    assert DayHours.from_entry("25:00-26:00") is None


def test_weekly_hours_requires_seven_slots():
    with pytest.raises(ValueError):
        WeeklyHours(days=(None, None))


def test_weekly_hours_schedule_display(sample_field_map):
    weekly = WeeklyHours.from_day_map(sample_field_map["openingHours"])

    assert weekly.get_working_days_count() == 7
    assert weekly[Weekday.FRIDAY].close == "20:00"
    assert weekly.format_schedule_display()[0] == "Monday: 07:00-19:00"
