from datetime import date

from offerscore.services.scoring.parsing import (
    calculate_age,
    parse_budget,
    parse_departure_hour,
    parse_room_capacity,
    parse_transfer_minutes,
)


# ------------------------------------------------------------------
# calculate_age
# ------------------------------------------------------------------

def test_age_counts_whole_calendar_years():
    assert calculate_age(date(2018, 6, 1), date(2026, 6, 1)) == 8


def test_age_before_birthday_is_one_less():
    assert calculate_age(date(2018, 6, 2), date(2026, 6, 1)) == 7


def test_age_leap_day_birth():
    assert calculate_age(date(2016, 2, 29), date(2026, 2, 28)) == 9
    assert calculate_age(date(2016, 2, 29), date(2026, 3, 1)) == 10


def test_age_future_birth_date_is_absolute_difference():
    assert calculate_age(date(2028, 6, 1), date(2026, 6, 1)) == 2


# ------------------------------------------------------------------
# parse_transfer_minutes
# ------------------------------------------------------------------

def test_transfer_minutes_from_free_text():
    assert parse_transfer_minutes("45 min") == 45


def test_transfer_minutes_default_when_missing_or_no_digits():
    assert parse_transfer_minutes(None) == 60
    assert parse_transfer_minutes("") == 60
    assert parse_transfer_minutes("about an hour") == 60


def test_transfer_minutes_concatenates_all_digits():
    assert parse_transfer_minutes("1h 30min") == 130


# ------------------------------------------------------------------
# parse_departure_hour
# ------------------------------------------------------------------

def test_departure_hour_from_hh_mm():
    assert parse_departure_hour("06:00") == 6
    assert parse_departure_hour("14:35") == 14


def test_departure_hour_single_digit_hour():
    assert parse_departure_hour("9:30") == 9


def test_departure_hour_defaults_to_noon():
    assert parse_departure_hour(None) == 12
    assert parse_departure_hour("") == 12
    assert parse_departure_hour("late") == 12


# ------------------------------------------------------------------
# parse_room_capacity / parse_budget
# ------------------------------------------------------------------

def test_room_capacity_sums_pattern():
    assert parse_room_capacity("Standard 2+2") == 4
    assert parse_room_capacity("Family 2+3") == 5


def test_room_capacity_defaults_to_four():
    assert parse_room_capacity("Suite") == 4
    assert parse_room_capacity("") == 4
    assert parse_room_capacity(None) == 4


def test_budget_parsed_from_up_to_phrase():
    assert parse_budget("budget up to 3000, all inclusive") == 3000


def test_budget_absent():
    assert parse_budget("cheap please") is None
    assert parse_budget("") is None


def test_transfer_minutes_ignores_non_ascii_digit_characters():
    assert parse_transfer_minutes("45 min (area 2 km²)") == 452
    assert parse_transfer_minutes("ok. 45 min²") == 45
    assert parse_transfer_minutes("① hour") == 60
