#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar  8 14:02:37 2025
"""

from collections import namedtuple
from enum import Enum
from operator import index as _index

from cdate.constants import mdays, ITALY_JD, ENGLAND_JD
from cdate.errors import InvalidArgumentTypeError, InvalidDateError

"""
Calendar reform policy.

A date is converted with Julian or Gregorian leap year rules depending on
the day of calendar reform. There are 3 kinds of reform:
    - Mixed: a Julian calendar that switches to Gregorian at a given
      Julian day number. Days before that number use the Julian rules.
      ITALY (October 15, 1582) and ENGLAND (September 14, 1752) are the
      best known reform days.
    - Julian: the proleptic Julian calendar, Julian rules at every day.
    - Gregorian: the proleptic Gregorian calendar, Gregorian rules at
      every day.
Julian day numbers are the same in all calendars. Only the conversion
from a day number to a year based date depends on the reform.
"""


class Style(Enum):
    MIXED = 0
    JULIAN = 1
    GREGORIAN = 2


class Reform(namedtuple("Reform", ["style", "jd"])):
    """
    Day of calendar reform.

    Use the constructors mixed(), threshold(), julian() and gregorian()
    or one of the constants ITALY, ENGLAND, JULIAN and GREGORIAN. The
    jd field is None unless the style is Style.MIXED.
    """
    __slots__ = ()

    GD0 = 1721425  # jd of Gregorian day 0 (0000-12-31)

    @classmethod
    def threshold(cls, jd):
        """
        Reform at Julian day number jd.

        Days before jd use the Julian calendar, jd and later days use
        the Gregorian calendar.
        """
        try:
            jd = _index(jd)
        except TypeError:
            raise InvalidArgumentTypeError(
                f"reform day must be an integer, not {type(jd).__name__}")
        return cls(Style.MIXED, jd)

    @classmethod
    def mixed(cls, gr_year, gr_month, gr_day):
        """
        Reform at the given (Gregorian) date.

        In some countries the calendar reform was implemented (much) after
        1582. A historically correct calendar can be set by calling mixed
        with the Gregorian reform date.

        Parameters
        ----------
        gr_year : int
            (Gregorian) year of the calendar reform.
        gr_month : int
            (Gregorian) month of the calendar reform.
        gr_day : int
            (Gregorian) day of the calendar reform.

        Raises
        ------
        InvalidDateError
            If the date is not a valid Gregorian date or if it is
            before March 1, 200. Before that date the Julian calendar is
            ahead of the Gregorian one and dates would occur twice.

        Returns
        -------
        Reform
        """
        year, month, day = _index(gr_year), _index(gr_month), _index(gr_day)
        if not 1 <= month <= 12:
            raise InvalidDateError(f"month must be in 1..12 ({month})")
        dmax = mdays[month]
        if month == 2 and gregorian_leap(year):
            dmax += 1
        if not 1 <= day <= dmax:
            raise InvalidDateError(f"day must be in 1..{dmax} ({day})")
        if (year, month, day) < (200, 3, 1):
            raise InvalidDateError("reform date must be on or after 200-03-01")
        return cls.threshold(cls._GD0(year, month, day) + cls.GD0)

    @classmethod
    def julian(cls):
        return cls(Style.JULIAN, None)

    @classmethod
    def gregorian(cls):
        return cls(Style.GREGORIAN, None)

    @classmethod
    def parse(cls, text):
        """
        Reform from a name (italy, england, julian, gregorian) or a
        Julian day number given as a string.
        """
        name = text.strip().lower()
        if name in _named:
            return _named[name]
        try:
            return cls.threshold(int(name))
        except ValueError:
            raise ValueError(f"unknown reform '{text}'") from None

    @staticmethod
    def _GD0(gr_year, gr_month, gr_day):
        """
        Given a Gregorian date, compute the day number.
        Handles positive and negative years.
        Day 0 is at 0-12-31.
        """
        y = gr_year - 1
        ord = 365 * y + y // 4 - y // 100 + y // 400
        ord += (367 * gr_month - 362) // 12
        if gr_month > 2:
            if gregorian_leap(gr_year):
                ord -= 1
            else:
                ord -= 2
        ord += gr_day
        return ord

    def is_julian(self, jd):
        if self.style is Style.MIXED:
            return jd < self.jd
        return self.style is Style.JULIAN

    def is_gregorian(self, jd):
        return not self.is_julian(jd)

    def fix_style(self, jd):
        if self.is_julian(jd):
            return JULIAN
        return GREGORIAN

    def __repr__(self):
        for name, reform in _named.items():
            if reform == self:
                return name.upper()
        return f"Reform.threshold({self.jd})"


ITALY = Reform.threshold(ITALY_JD)
ENGLAND = Reform.threshold(ENGLAND_JD)
JULIAN = Reform.julian()
GREGORIAN = Reform.gregorian()

_named = {"italy": ITALY, "england": ENGLAND,
          "julian": JULIAN, "gregorian": GREGORIAN}


def as_reform(sg):
    """
    Check a reform argument.

    An integer is taken as the Julian day number of the reform. Anything
    else that is not a Reform raises InvalidArgumentTypeError.
    """
    if isinstance(sg, Reform):
        return sg
    if isinstance(sg, bool):
        raise InvalidArgumentTypeError("reform must be a Reform, not bool")
    return Reform.threshold(sg)


def is_julian(jd, sg):
    """
    Check if Julian day number jd falls in the Julian calendar.

    Parameters
    ----------
    jd : int
        Julian day number.
    sg : Reform
        Day of calendar reform.

    Returns
    -------
    bool
        True if the Julian leap year rule applies at jd.
    """
    return sg.is_julian(jd)


def is_gregorian(jd, sg):
    return not sg.is_julian(jd)


def fix_style(jd, sg):
    """
    The proleptic calendar (JULIAN or GREGORIAN) in effect at jd.

    Used to convert neighbouring dates, such as the end of the previous
    year, within the same calendar.
    """
    return sg.fix_style(jd)


def julian_leap(year):
    """
    Check if a given year is a leap year in the (proleptic) Julian calendar

    This function assumes counting of BCE years starts at zero.
    1 BCE (0) is a leap year.
    """
    return year % 4 == 0


def gregorian_leap(year):
    """
    Check if a given year is a leap year in the (proleptic)
    Gregorian calendar.

    Parameters
    ----------
    year : int

    Returns
    -------
    Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear
