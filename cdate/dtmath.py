#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar  8 16:40:12 2025
"""

import numpy as np
from fractions import Fraction

from cdate.calendar import GREGORIAN, Style
from cdate.constants import (MJD_EPOCH, LD_EPOCH, AMJD_EPOCH, HALF,
                             DAY_HOUR, DAY_MINUTE, DAY_SECOND)

"""
Date math. These algorithms use Julian day numbers to compute differences
between dates. A Julian day number counts days from -4712-01-01 (Julian
calendar); the astronomical Julian day (ajd) starts at noon UTC and
carries the time of day as a fraction.

The year before +1 is defined as the year 0 (as is usually done in
astronomy). The JD algorithm follows Meeus, with the floating point
constants (365.25, 30.6001, 36524.25, 122.1) replaced by exact integer
ratios so that all divisions floor correctly for negative years.

Every conversion takes a Reform (sg) that selects the Julian or the
Gregorian leap year rule at the converted day.
"""


def civil_to_jd(year, month, day, sg=GREGORIAN):
    """
    Julian day number of a civil date.

    Assumes that year, month and day are valid. Out of range values are
    not rejected: they are counted on from the previous valid date.

    Parameters
    ----------
    year : int
    month : int
    day : int
    sg : Reform
        Day of calendar reform.

    Returns
    -------
    int
        The Julian day number.
    """
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    jd = (1461 * (year + 4716)) // 4 + (306001 * (month + 1)) // 10000 \
        + day + b - 1524
    if sg.is_julian(jd):
        jd -= b
    return jd


def jd_to_civil(jd, sg=GREGORIAN):
    """
    Reverse Julian Day. Compute the civil date (year, month, day) of jd.

    Parameters
    ----------
    jd : int
        Julian day number.
    sg : Reform
        Day of calendar reform.

    Returns
    -------
    year, month, day
    """
    if sg.is_julian(jd):
        a = jd
    else:
        x = (4 * jd - 7468865) // 146097  # (jd - 1867216.25) / 36524.25
        a = jd + 1 + x - x // 4
    b = a + 1524
    c = (20 * b - 2442) // 7305  # (b - 122.1) / 365.25
    d = (1461 * c) // 4
    e = (10000 * (b - d)) // 306001
    dom = b - d - (306001 * e) // 10000
    if e <= 13:
        m = e - 1
        y = c - 4716
    else:
        m = e - 13
        y = c - 4715
    return y, m, dom


def ordinal_to_jd(year, yday, sg=GREGORIAN):
    return civil_to_jd(year, 1, yday, sg)


def jd_to_ordinal(jd, sg=GREGORIAN):
    """
    Ordinal date (year, day of year) of jd.

    The day of year is counted from December 31 of the previous year in
    the same calendar (Julian or Gregorian) as jd.
    """
    year = jd_to_civil(jd, sg)[0]
    yday = jd - civil_to_jd(year - 1, 12, 31, sg.fix_style(jd))
    return year, yday


def commercial_to_jd(year, week, day, sg=GREGORIAN):
    """
    Julian day number of a commercial (ISO 8601 week) date.

    Week 1 is the week with January 4, weeks start at Monday (day 1).
    """
    jd = civil_to_jd(year, 1, 4, sg)
    return (jd - jd % 7) + 7 * (week - 1) + (day - 1)


def jd_to_commercial(jd, sg=GREGORIAN):
    """
    Commercial date of jd.

    Returns
    -------
    year, week, day
        Commercial year, week of the year (1-53) and day of the week
        (1: Monday, 7: Sunday).
    """
    ns = sg.fix_style(jd)
    a = jd_to_civil(jd - 3, ns)[0]
    if jd >= commercial_to_jd(a + 1, 1, 1, ns):
        year = a + 1
    else:
        year = a
    week = 1 + (jd - commercial_to_jd(year, 1, 1, ns)) // 7
    day = (jd + 1) % 7
    if day == 0:
        day = 7
    return year, week, day


def weeknum_to_jd(year, week, day, f=0, sg=GREGORIAN):
    """
    Julian day number of a week number date.

    f is the first day of the week (0: Sunday, 1: Monday). Week 0 holds
    the days of the year before the first day f. day counts from the
    first day of the week (0).
    """
    a = civil_to_jd(year, 1, 1, sg) + 6
    return (a - ((a - f) + 1) % 7 - 7) + 7 * week + day


def jd_to_weeknum(jd, f=0, sg=GREGORIAN):
    ns = sg.fix_style(jd)
    year = jd_to_civil(jd, ns)[0]
    a = civil_to_jd(year, 1, 1, ns) + 6
    week, day = divmod(jd - (a - ((a - f) + 1) % 7) + 7, 7)
    return year, week, day


# 0 is sunday, 1 is monday etc.
def jd_to_wday(jd):
    return (jd + 1) % 7


def ajd_to_jd(ajd, of=0):
    """
    Split an astronomical Julian day into the civil day number and the
    fraction of the (local) day.

    Parameters
    ----------
    ajd : Fraction
        Astronomical Julian day (UTC, from noon).
    of : Fraction
        Offset from UTC as a fraction of a day.

    Returns
    -------
    jd : int
    fr : Fraction
        Day fraction in [0, 1).
    """
    jd, fr = divmod(ajd + of + HALF, 1)
    return jd, fr


def jd_to_ajd(jd, fr, of=0):
    return jd + fr - of - HALF


def day_fraction_to_time(fr):
    """
    Convert a fraction of a day to (hour, minute, second, fraction). The
    remaining fraction is in days.
    """
    hour, fr = divmod(fr, DAY_HOUR)
    minute, fr = divmod(fr, DAY_MINUTE)
    second, fr = divmod(fr, DAY_SECOND)
    return hour, minute, second, fr


def time_to_day_fraction(hour, minute, second, fr=0):
    return Fraction(hour) / 24 + Fraction(minute) / 1440 \
        + Fraction(second) / 86400 + fr


def amjd_to_ajd(amjd):
    return amjd + AMJD_EPOCH


def ajd_to_amjd(ajd):
    return ajd - AMJD_EPOCH


def mjd_to_jd(mjd):
    return mjd + MJD_EPOCH


def jd_to_mjd(jd):
    return jd - MJD_EPOCH


def ld_to_jd(ld):
    return ld + LD_EPOCH


def jd_to_ld(jd):
    return jd - LD_EPOCH


# numpy versions of the civil conversion, for bulk data.

def _julian_mask(jd, sg):
    if sg.style is Style.MIXED:
        return jd < sg.jd
    return np.full(jd.shape, sg.style is Style.JULIAN)


def civil_to_jd_array(year, month, day, sg=GREGORIAN):
    """
    Array version of civil_to_jd.

    Parameters
    ----------
    year, month, day : array_like of int
        Broadcastable civil date fields.
    sg : Reform

    Returns
    -------
    numpy.ndarray of int64
    """
    year, month, day = np.broadcast_arrays(np.asarray(year, dtype=np.int64),
                                           np.asarray(month, dtype=np.int64),
                                           np.asarray(day, dtype=np.int64))
    early = month <= 2
    y = np.where(early, year - 1, year)
    m = np.where(early, month + 12, month)
    a = y // 100
    b = 2 - a + a // 4
    jd = (1461 * (y + 4716)) // 4 + (306001 * (m + 1)) // 10000 \
        + day + b - 1524
    return np.where(_julian_mask(jd, sg), jd - b, jd)


def jd_to_civil_array(jd, sg=GREGORIAN):
    """
    Array version of jd_to_civil.

    Returns
    -------
    year, month, day : numpy.ndarray of int64
    """
    jd = np.asarray(jd, dtype=np.int64)
    x = (4 * jd - 7468865) // 146097
    a = np.where(_julian_mask(jd, sg), jd, jd + 1 + x - x // 4)
    b = a + 1524
    c = (20 * b - 2442) // 7305
    d = (1461 * c) // 4
    e = (10000 * (b - d)) // 306001
    dom = b - d - (306001 * e) // 10000
    m = np.where(e <= 13, e - 1, e - 13)
    y = np.where(e <= 13, c - 4716, c - 4715)
    return y, m, dom


def jd_to_wday_array(jd):
    return (np.asarray(jd, dtype=np.int64) + 1) % 7
