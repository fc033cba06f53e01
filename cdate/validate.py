#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar  9 11:25:50 2025
"""

from operator import index as _index

from cdate.calendar import ITALY, GREGORIAN
from cdate.dtmath import (civil_to_jd, jd_to_civil, ordinal_to_jd,
                          jd_to_ordinal, commercial_to_jd, jd_to_commercial,
                          weeknum_to_jd, jd_to_weeknum, time_to_day_fraction)
from cdate.errors import InvalidArgumentTypeError

"""
Validation of date and time fields.

Each valid_* function returns the Julian day number of the date (or the
day fraction of the time), or None if the fields do not denote a real
day. A date is valid if converting its day number back gives the same
fields. Days skipped at the calendar reform have no fields that convert
back to them, so they are rejected by the same check.

Negative fields count backwards from the end of the enclosing unit: day
-1 is the last day of the month (or year), month -1 is December, week
-1 is the last week of the year. No wraparound is performed.
"""


def check_int_fields(*fields):
    """
    Check that all fields are integers.

    Raises
    ------
    InvalidArgumentTypeError
        A field is not an integer.

    Returns
    -------
    tuple
        The fields as int.
    """
    try:
        return tuple(_index(field) for field in fields)
    except TypeError:
        names = ", ".join(type(field).__name__ for field in fields)
        raise InvalidArgumentTypeError(f"integer fields expected ({names})")


def valid_jd(jd, sg=ITALY):
    """Any integer is a valid Julian day number."""
    return _index(jd)


def valid_ordinal(year, yday, sg=ITALY):
    """
    Check an ordinal date.

    Valid values of yday are -365..-1, 1..365 in a common year and
    -366..-1, 1..366 in a leap year.

    Parameters
    ----------
    year : int
    yday : int
        Day of the year.
    sg : Reform
        Day of calendar reform.

    Returns
    -------
    int or None
        The Julian day number, None if the date is not valid.
    """
    if yday < 0:
        ny = year + 1
        jd = ordinal_to_jd(ny, yday + 1, sg)
        ns = sg.fix_style(jd)
        if jd_to_ordinal(jd, sg)[0] != year:
            return None
        if jd_to_ordinal(jd - yday, ns) != (ny, 1):
            return None
    else:
        jd = ordinal_to_jd(year, yday, sg)
        if jd_to_ordinal(jd, sg) != (year, yday):
            return None
    return jd


def valid_civil(year, month, day, sg=ITALY):
    """
    Check a civil date.

    Parameters
    ----------
    year : int
    month : int
        Month, -12..-1 or 1..12.
    day : int
        Day of the month, negative to count from the end of the month.
    sg : Reform
        Day of calendar reform.

    Returns
    -------
    int or None
        The Julian day number, None if the date is not valid.
    """
    if month < 0:
        month += 13
    if day < 0:
        ny, nm = divmod(year * 12 + month, 12)
        nm += 1
        jd = civil_to_jd(ny, nm, day + 1, sg)
        ns = sg.fix_style(jd)
        if jd_to_civil(jd, sg)[:2] != (year, month):
            return None
        if jd_to_civil(jd - day, ns) != (ny, nm, 1):
            return None
    else:
        jd = civil_to_jd(year, month, day, sg)
        if jd_to_civil(jd, sg) != (year, month, day):
            return None
    return jd


def valid_commercial(year, week, day, sg=ITALY):
    """
    Check a commercial date (Monday is day 1, Sunday is day 7).

    Commercial dates only exist in the Gregorian calendar.
    """
    if day < 0:
        day += 8
    if week < 0:
        ny, nw, nd = jd_to_commercial(
            commercial_to_jd(year + 1, 1, 1, GREGORIAN) + week * 7, GREGORIAN)
        if ny != year:
            return None
        week = nw
    jd = commercial_to_jd(year, week, day, GREGORIAN)
    if sg.is_julian(jd):
        return None
    if jd_to_commercial(jd, GREGORIAN) != (year, week, day):
        return None
    return jd


def valid_weeknum(year, week, day, f, sg=ITALY):
    """
    Check a week number date.

    f is the first day of the week, 0 for Sunday and 1 for Monday. day
    counts from the first day of the week, which is day 0. Like
    commercial dates, week numbers only exist in the Gregorian calendar.
    """
    if day < 0:
        day += 7
    if week < 0:
        ny, nw, nd = jd_to_weeknum(
            weeknum_to_jd(year + 1, 1, f, f, GREGORIAN) + week * 7, f,
            GREGORIAN)
        if ny != year:
            return None
        week = nw
    jd = weeknum_to_jd(year, week, day, f, GREGORIAN)
    if sg.is_julian(jd):
        return None
    if jd_to_weeknum(jd, f, GREGORIAN) != (year, week, day):
        return None
    return jd


def valid_time(hour, minute, second):
    """
    Check a time on the 24 hour clock.

    Negative fields count back from the end of the day, hour or minute
    (minute -2 is minute 58). 24:00:00 is the end of the day.

    Returns
    -------
    Fraction or None
        Fraction of the day, None if the time is not valid.
    """
    if hour < 0:
        hour += 24
    if minute < 0:
        minute += 60
    if second < 0:
        second += 60
    if not ((0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59)
            or (hour == 24 and minute == 0 and second == 0)):
        return None
    return time_to_day_fraction(hour, minute, second)
