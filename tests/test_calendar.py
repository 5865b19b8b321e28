import pytest


def test_year_lengths_and_remainders():
    from pyorrery.calendar import days_in_year, remainder_days

    assert days_in_year(False) == 513
    assert days_in_year(True) == 512
    assert remainder_days(False) == 3
    assert remainder_days(True) == 2


def test_month_layout():
    from pyorrery.bodies import terrax_calendar

    cal = terrax_calendar()
    assert len(cal.months) == 13
    assert [m.id for m in cal.months if m.is_long] == [4, 8, 13]
    assert sum(1 for m in cal.months if m.days == 39) == 10
    assert cal.month_days_total == 510


def test_first_and_last_day_of_normal_year():
    from pyorrery.calendar import REMAINDER_MONTH, date_from_day

    first = date_from_day(1)
    assert (first.month, first.day_in_month, first.is_remainder) == (1, 1, False)

    last = date_from_day(513)
    assert last.month == REMAINDER_MONTH
    assert last.is_remainder
    assert last.day_in_month == 3


def test_every_day_is_claimed_exactly_once():
    from pyorrery.calendar import date_from_day

    for leap, total in ((False, 513), (True, 512)):
        seen = set()
        for d in range(1, total + 1):
            date = date_from_day(d, leap)
            key = (date.month, date.day_in_month)
            assert key not in seen
            seen.add(key)
        assert len(seen) == total


def test_month_start_day_maps_back_to_first_day():
    from pyorrery.calendar import date_from_day, month_start_day

    for i in range(13):
        date = date_from_day(month_start_day(i) + 1)
        assert date.month == i + 1
        assert date.day_in_month == 1
    assert month_start_day(0) == 0
    assert month_start_day(4) == 39 * 3 + 40
    with pytest.raises(IndexError):
        month_start_day(14)


def test_remainder_block_and_clamping():
    from pyorrery.calendar import REMAINDER_MONTH, date_from_day, remainder_start_day

    assert remainder_start_day(False) == 511
    assert remainder_start_day(True) == 511
    leap_last = date_from_day(512, leap_year=True)
    assert (leap_last.month, leap_last.day_in_month) == (REMAINDER_MONTH, 2)
    # past the end of a leap year: clamped instead of raising
    past = date_from_day(513, leap_year=True)
    assert (past.month, past.day_in_month) == (REMAINDER_MONTH, 2)
    assert date_from_day(900).day_in_month == 3


def test_fractional_and_low_days():
    from pyorrery.calendar import date_from_day

    assert date_from_day(1.9) == date_from_day(1)
    assert date_from_day(39.5).month == 1
    assert date_from_day(40.0).month == 2
    assert date_from_day(0.2) == date_from_day(1)


def test_leap_years():
    from pyorrery.calendar import is_leap_year

    assert [y for y in range(1, 19) if is_leap_year(y)] == [6, 12, 18]
    assert not is_leap_year(0)


def test_deep_day_decomposition():
    from pyorrery.calendar import date_from_deep_day

    d = date_from_deep_day(513)
    assert (d.year, d.day_of_year, d.leap_year) == (1, 513, False)
    d = date_from_deep_day(514)
    assert (d.year, d.day_of_year) == (2, 1)

    start_y6 = 5 * 513 + 1
    d = date_from_deep_day(start_y6)
    assert (d.year, d.day_of_year, d.leap_year) == (6, 1, True)
    d = date_from_deep_day(start_y6 + 511)
    assert (d.year, d.day_of_year) == (6, 512)
    assert d.date.day_in_month == 2 and d.date.is_remainder
    d = date_from_deep_day(start_y6 + 512)
    assert (d.year, d.day_of_year, d.leap_year) == (7, 1, False)

    cycle = 5 * 513 + 512
    d = date_from_deep_day(10 * cycle + 1)
    assert (d.year, d.day_of_year) == (61, 1)


def test_calendar_definition_validation():
    from pyorrery.bodies import CalendarDefinition

    with pytest.raises(ValueError):
        CalendarDefinition(months=())
