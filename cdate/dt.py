#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 14 10:33:58 2025
"""

import time
from collections import namedtuple
from datetime import timedelta
from fractions import Fraction
from functools import total_ordering, cached_property
from numbers import Rational, Real

from cdate import config
from cdate.calendar import ITALY, ENGLAND, JULIAN, GREGORIAN, as_reform
from cdate.constants import SPD, USPD, UNIX_EPOCH, HALF
from cdate.dtmath import (civil_to_jd, jd_to_civil, jd_to_ordinal,
                          jd_to_commercial, jd_to_weeknum, jd_to_wday,
                          ajd_to_jd, jd_to_ajd, ajd_to_amjd, jd_to_mjd,
                          jd_to_ld, mjd_to_jd, day_fraction_to_time)
from cdate.errors import InvalidDateError, InvalidArgumentTypeError
from cdate.frags import (rewrite_frags, complete_frags, valid_date_frags,
                         valid_time_frags, exact)
from cdate.validate import (check_int_fields, valid_jd, valid_ordinal,
                            valid_civil, valid_commercial, valid_weeknum,
                            valid_time)

"""
Date and DateTime values.

A value is an astronomical Julian day (ajd, UTC, counted from noon), an
offset from UTC (of, a fraction of a day) and a day of calendar reform
(sg). All fields (year, month, week, hour, ...) are computed from these
three and cached. Values are immutable: offset and reform changes and
date arithmetic return new values.

Values are compared by ajd, so a DateTime at 00:00 in UTC+1 is earlier
than one at 00:00 in UTC. same_day() compares the local calendar day.
"""

DateTuple = namedtuple("DateTuple", ["year", "month", "day"])
OrdinalTuple = namedtuple("OrdinalTuple", ["year", "yday"])
IsoCalendarDate = namedtuple("IsoCalendarDate", ["year", "week", "weekday"])
WeekTuple = namedtuple("WeekTuple", ["year", "week", "day"])
TimeTuple = namedtuple("TimeTuple", ["hour", "minute", "second", "fraction"])


class DTMeta(type):
    def __init__(cls, name, bases, dct):
        cls.cname = name
        super().__init__(name, bases, dct)


def _days(n):
    """
    A day count as an exact number, None if n is not a number of days.
    """
    if isinstance(n, timedelta):
        return Fraction(n.days) + Fraction(n.seconds, SPD) \
            + Fraction(n.microseconds, USPD)
    if isinstance(n, bool):
        return None
    if isinstance(n, Rational):
        return n
    if isinstance(n, Real):
        return exact(n)
    return None


def _offset(of):
    days = _days(of)
    if days is None:
        raise InvalidArgumentTypeError(
            f"offset must be a fraction of a day or a timedelta, "
            f"not {type(of).__name__}")
    return days


def _reform(sg):
    if sg is None:
        return config.DEFAULT_REFORM
    return as_reform(sg)


def _clock_offset(ts, of):
    if of is None:
        of = config.DEFAULT_OFFSET
    if of is None:
        return Fraction(time.localtime(float(ts)).tm_gmtoff, SPD)
    return _offset(of)


def _unix_ajd(ts):
    """ajd of a POSIX time stamp. Floats are rounded to microseconds."""
    if isinstance(ts, Rational):
        seconds = Fraction(ts)
    else:
        seconds = Fraction(round(ts * 1000000), 1000000)
    return UNIX_EPOCH - HALF + seconds / SPD


@total_ordering
class Date(metaclass=DTMeta):
    """
    A calendar date.

    Date(year, month, day, sg) creates a date from a civil date. The
    other representations have their own constructors: fromjd,
    fromordinal, fromcivil, fromcommercial, fromweeknum, frommjd and
    fromfrags for partial fields.
    """
    ITALY = ITALY
    ENGLAND = ENGLAND
    JULIAN = JULIAN
    GREGORIAN = GREGORIAN

    def __new__(cls, year=-4712, month=1, day=1, sg=None):
        return cls.fromcivil(year, month, day, sg)

    @classmethod
    def _new(cls, ajd, of=0, sg=ITALY):
        self = object.__new__(cls)
        d = self.__dict__
        d["_ajd"] = ajd
        d["_of"] = of
        d["_sg"] = sg
        return self

    @classmethod
    def _fromjd(cls, jd, fields, sg):
        if jd is None:
            raise InvalidDateError(f"{cls.cname}: invalid date {fields}")
        return cls._new(jd_to_ajd(jd, 0, 0), 0, sg)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.cname} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.cname} objects are immutable")

    def __reduce__(self):
        return (self.__class__._new, (self._ajd, self._of, self._sg))

    # constructors

    @classmethod
    def fromjd(cls, jd=0, sg=None):
        sg = _reform(sg)
        jd, = check_int_fields(jd)
        return cls._fromjd(valid_jd(jd, sg), (jd,), sg)

    @classmethod
    def frommjd(cls, mjd, sg=None):
        return cls.fromjd(mjd_to_jd(mjd), sg)

    @classmethod
    def fromordinal(cls, year=-4712, yday=1, sg=None):
        """
        Date from an ordinal date. A negative yday counts backwards from
        the end of the year (-1 is December 31).
        """
        sg = _reform(sg)
        fields = check_int_fields(year, yday)
        return cls._fromjd(valid_ordinal(*fields, sg), fields, sg)

    @classmethod
    def fromcivil(cls, year=-4712, month=1, day=1, sg=None):
        """
        Date from a civil date.

        Negative month and day count backwards from the end of the year
        and the end of the month.

        Parameters
        ----------
        year : int
        month : int
        day : int
        sg : Reform
            Day of calendar reform. Defaults to the configured reform.

        Raises
        ------
        InvalidDateError
            Not a valid date, or a date skipped at the calendar reform.
        InvalidArgumentTypeError
            A field is not an integer.

        Returns
        -------
        Date
        """
        sg = _reform(sg)
        fields = check_int_fields(year, month, day)
        return cls._fromjd(valid_civil(*fields, sg), fields, sg)

    @classmethod
    def fromcommercial(cls, year=1582, week=41, day=5, sg=None):
        """
        Date from a commercial (ISO 8601 week) date. Monday is day 1.
        """
        sg = _reform(sg)
        fields = check_int_fields(year, week, day)
        return cls._fromjd(valid_commercial(*fields, sg), fields, sg)

    @classmethod
    def fromweeknum(cls, year=1582, week=41, day=5, f=0, sg=None):
        sg = _reform(sg)
        fields = check_int_fields(year, week, day, f)
        return cls._fromjd(valid_weeknum(*fields, sg), fields, sg)

    @classmethod
    def fromfrags(cls, elem, sg=None, clock=None, of=None):
        """
        Date from (partial) parser fields.

        Missing fields are taken from today's date, see cdate.frags.
        """
        sg = _reform(sg)
        elem = rewrite_frags(elem)
        elem = complete_frags(elem, lambda: Date.today(sg, clock, of))
        return cls._fromjd(valid_date_frags(elem, sg), elem, sg)

    @classmethod
    def fromtimestamp(cls, timestamp, of=None, sg=None):
        """
        The local date at a POSIX time stamp.

        of is the UTC offset (fraction of a day or timedelta); None
        takes the configured offset or that of the local time zone.
        """
        if timestamp is None:
            raise InvalidArgumentTypeError(
                "'NoneType' object cannot be interpreted as a time stamp")
        sg = _reform(sg)
        of = _clock_offset(timestamp, of)
        jd = ajd_to_jd(_unix_ajd(timestamp), of)[0]
        return cls._new(jd_to_ajd(jd, 0, 0), 0, sg)

    @classmethod
    def today(cls, sg=None, clock=None, of=None):
        """
        Today's date.

        clock is a callable that returns the POSIX time, time.time by
        default.
        """
        if clock is None:
            clock = time.time
        return Date.fromtimestamp(clock(), of, sg)

    # day counts

    @property
    def ajd(self):
        return self._ajd

    @property
    def amjd(self):
        return ajd_to_amjd(self._ajd)

    @cached_property
    def _jd_fr(self):
        return ajd_to_jd(self._ajd, self._of)

    @property
    def jd(self):
        return self._jd_fr[0]

    @property
    def day_fraction(self):
        return self._jd_fr[1]

    @property
    def mjd(self):
        return jd_to_mjd(self.jd)

    @property
    def ld(self):
        return jd_to_ld(self.jd)

    @property
    def start(self):
        return self._sg

    @property
    def offset(self):
        """UTC offset, a fraction of a day. Always 0 for a Date."""
        return self._of

    # calendar fields

    @cached_property
    def civil(self):
        return DateTuple(*jd_to_civil(self.jd, self._sg))

    @cached_property
    def ordinal(self):
        return OrdinalTuple(*jd_to_ordinal(self.jd, self._sg))

    @cached_property
    def commercial(self):
        return IsoCalendarDate(*jd_to_commercial(self.jd, self._sg))

    @cached_property
    def weeknum0(self):
        return WeekTuple(*jd_to_weeknum(self.jd, 0, self._sg))

    @cached_property
    def weeknum1(self):
        return WeekTuple(*jd_to_weeknum(self.jd, 1, self._sg))

    @property
    def year(self):
        return self.civil.year

    @property
    def month(self):
        return self.civil.month

    @property
    def day(self):
        return self.civil.day

    mon = month
    mday = day

    @property
    def yday(self):
        return self.ordinal.yday

    @property
    def cwyear(self):
        return self.commercial.year

    @property
    def cweek(self):
        return self.commercial.week

    @property
    def cwday(self):
        return self.commercial.weekday

    @property
    def wnum0(self):
        return self.weeknum0.week

    @property
    def wnum1(self):
        return self.weeknum1.week

    @cached_property
    def wday(self):
        """Day of the week, 0 is Sunday."""
        return jd_to_wday(self.jd)

    def isocalendar(self):
        return self.commercial

    def isoweekday(self):
        return self.cwday

    def weekday(self):
        """Day of the week, 0 is Monday."""
        return self.cwday - 1

    # calendar reform

    def is_julian(self):
        return self._sg.is_julian(self.jd)

    def is_gregorian(self):
        return self._sg.is_gregorian(self.jd)

    def fix_style(self):
        return self._sg.fix_style(self.jd)

    def is_leap(self):
        ns = self.fix_style()
        return jd_to_civil(civil_to_jd(self.year, 3, 1, ns) - 1, ns)[2] == 29

    def new_start(self, sg=ITALY):
        return self._new(self._ajd, self._of, as_reform(sg))

    with_reform_point = new_start

    def italy(self):
        return self.new_start(ITALY)

    def england(self):
        return self.new_start(ENGLAND)

    def julian(self):
        return self.new_start(JULIAN)

    def gregorian(self):
        return self.new_start(GREGORIAN)

    # arithmetic

    def add_days(self, n):
        days = _days(n)
        if days is None:
            raise InvalidArgumentTypeError(
                f"{self.cname}: expected numeric, not {type(n).__name__}")
        return self._new(self._ajd + days, self._of, self._sg)

    def subtract_days(self, n):
        days = _days(n)
        if days is None:
            raise InvalidArgumentTypeError(
                f"{self.cname}: expected numeric, not {type(n).__name__}")
        return self._new(self._ajd - days, self._of, self._sg)

    def __add__(self, n):
        return self.add_days(n)

    __radd__ = __add__

    def __sub__(self, x):
        """
        self - n is the date n days earlier, self - date the number of
        days between the dates (a Fraction).
        """
        if isinstance(x, Date):
            return self._ajd - x._ajd
        if _days(x) is None:
            raise InvalidArgumentTypeError(
                f"{self.cname}: expected numeric or date, "
                f"not {type(x).__name__}")
        return self.subtract_days(x)

    def add_months(self, n):
        """
        The date n months later (earlier if n < 0).

        If the day of the month does not exist in the target month, the
        last day of that month is used. Time and offset are kept.
        """
        n, = check_int_fields(n)
        y, m = divmod(self.year * 12 + (self.month - 1) + n, 12)
        m += 1
        d = self.day
        ns = self.fix_style()
        jd2 = valid_civil(y, m, d, ns)
        while jd2 is None:
            d -= 1
            jd2 = valid_civil(y, m, d, ns)
        return self + (jd2 - self.jd)

    def __rshift__(self, n):
        return self.add_months(n)

    def __lshift__(self, n):
        return self.add_months(-n)

    def next_month(self, n=1):
        return self.add_months(n)

    def prev_month(self, n=1):
        return self.add_months(-n)

    def next_year(self, n=1):
        return self.add_months(n * 12)

    def prev_year(self, n=1):
        return self.add_months(-n * 12)

    def next_day(self, n=1):
        return self + n

    def prev_day(self, n=1):
        return self - n

    def succ(self):
        return self + 1

    def step(self, limit, by=1):
        return DateStep(self, limit, by)

    def upto(self, maximum):
        return DateStep(self, maximum, 1)

    def downto(self, minimum):
        return DateStep(self, minimum, -1)

    # comparison

    def _cmpkey(self, other):
        if isinstance(other, Date):
            return other._ajd
        if isinstance(other, Real) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other):
        key = self._cmpkey(other)
        if key is None:
            return NotImplemented
        return self._ajd == key

    def __lt__(self, other):
        key = self._cmpkey(other)
        if key is None:
            return NotImplemented
        return self._ajd < key

    def __hash__(self):
        return hash(self._ajd)

    def same_day(self, other):
        """
        True if other falls on the same (local) Julian day number. other
        may be a value or a day number.
        """
        if isinstance(other, Date):
            return self.jd == other.jd
        if isinstance(other, Real) and not isinstance(other, bool):
            return self.jd == other
        return False

    # text

    def isoformat(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"{self.cname}({self.year}, {self.month}, {self.day}, " \
               f"sg={self._sg!r})"


class DateTime(Date):
    """
    A date with time of day and UTC offset.

    DateTime(year, month, day, hour, minute, second, of, sg). The offset
    of is a fraction of a day (or a timedelta), positive east of
    Greenwich. Negative hour, minute and second count back from the end
    of the day, hour and minute; 24:00:00 is the end of the day.
    """

    def __new__(cls, year=-4712, month=1, day=1, hour=0, minute=0, second=0,
                of=0, sg=None):
        return cls.fromcivil(year, month, day, hour, minute, second, of, sg)

    @classmethod
    def _fromjd(cls, jd, fields, sg, hour=0, minute=0, second=0, of=0):
        hms = check_int_fields(hour, minute, second)
        fr = valid_time(*hms)
        if jd is None or fr is None:
            raise InvalidDateError(f"{cls.cname}: invalid date {fields} {hms}")
        of = _offset(of)
        return cls._new(jd_to_ajd(jd, fr, of), of, sg)

    @classmethod
    def fromjd(cls, jd=0, hour=0, minute=0, second=0, of=0, sg=None):
        sg = _reform(sg)
        jd, = check_int_fields(jd)
        return cls._fromjd(valid_jd(jd, sg), (jd,), sg,
                           hour, minute, second, of)

    @classmethod
    def frommjd(cls, mjd, hour=0, minute=0, second=0, of=0, sg=None):
        return cls.fromjd(mjd_to_jd(mjd), hour, minute, second, of, sg)

    @classmethod
    def fromordinal(cls, year=-4712, yday=1, hour=0, minute=0, second=0,
                    of=0, sg=None):
        sg = _reform(sg)
        fields = check_int_fields(year, yday)
        return cls._fromjd(valid_ordinal(*fields, sg), fields, sg,
                           hour, minute, second, of)

    @classmethod
    def fromcivil(cls, year=-4712, month=1, day=1, hour=0, minute=0,
                  second=0, of=0, sg=None):
        sg = _reform(sg)
        fields = check_int_fields(year, month, day)
        return cls._fromjd(valid_civil(*fields, sg), fields, sg,
                           hour, minute, second, of)

    @classmethod
    def fromcommercial(cls, year=1582, week=41, day=5, hour=0, minute=0,
                       second=0, of=0, sg=None):
        sg = _reform(sg)
        fields = check_int_fields(year, week, day)
        return cls._fromjd(valid_commercial(*fields, sg), fields, sg,
                           hour, minute, second, of)

    @classmethod
    def fromweeknum(cls, year=1582, week=41, day=5, f=0, hour=0, minute=0,
                    second=0, of=0, sg=None):
        sg = _reform(sg)
        fields = check_int_fields(year, week, day, f)
        return cls._fromjd(valid_weeknum(*fields, sg), fields, sg,
                           hour, minute, second, of)

    @classmethod
    def fromfrags(cls, elem, sg=None, clock=None, of=None):
        """
        DateTime from (partial) parser fields.

        A time without a date is taken to be today. sec_fraction and
        offset are in seconds.
        """
        sg = _reform(sg)
        elem = rewrite_frags(elem)
        elem = complete_frags(elem, lambda: Date.today(sg, clock, of),
                              with_time=True)
        jd = valid_date_frags(elem, sg)
        fr = valid_time_frags(elem)
        if jd is None or fr is None:
            raise InvalidDateError(f"{cls.cname}: invalid date {elem}")
        fr += exact(elem.get("sec_fraction") or 0) / SPD
        frag_of = exact(elem.get("offset") or 0) / SPD
        return cls._new(jd_to_ajd(jd, fr, frag_of), frag_of, sg)

    @classmethod
    def fromtimestamp(cls, timestamp, of=None, sg=None):
        """
        The local date and time at a POSIX time stamp.
        """
        if timestamp is None:
            raise InvalidArgumentTypeError(
                "'NoneType' object cannot be interpreted as a time stamp")
        sg = _reform(sg)
        of = _clock_offset(timestamp, of)
        return cls._new(_unix_ajd(timestamp), of, sg)

    @classmethod
    def now(cls, sg=None, clock=None, of=None):
        if clock is None:
            clock = time.time
        return cls.fromtimestamp(clock(), of, sg)

    # time fields

    def new_offset(self, of=0):
        return self._new(self._ajd, _offset(of), self._sg)

    with_offset = new_offset

    @cached_property
    def time(self):
        return TimeTuple(*day_fraction_to_time(self.day_fraction))

    @property
    def hour(self):
        return self.time.hour

    @property
    def minute(self):
        return self.time.minute

    @property
    def second(self):
        return self.time.second

    @property
    def second_fraction(self):
        """Fraction of a second."""
        return self.time.fraction * SPD

    min = minute
    sec = second
    sec_fraction = second_fraction

    def isoformat(self):
        minutes = int(self._of * 1440)
        sign = "-" if minutes < 0 else "+"
        hh, mm = divmod(abs(minutes), 60)
        return f"{Date.isoformat(self)}T{self.hour:02d}:{self.minute:02d}:" \
               f"{self.second:02d}{sign}{hh:02d}:{mm:02d}"

    def __repr__(self):
        return f"{self.cname}({self.year}, {self.month}, {self.day}, " \
               f"{self.hour}, {self.minute}, {self.second}, " \
               f"of={self._of}, sg={self._sg!r})"


class DateStep:
    """
    The values from start to limit (inclusive) by steps of by days.

    by must be positive to count up and negative to count down. The
    sequence is evaluated lazily and can be iterated more than once.
    """

    def __init__(self, start, limit, by=1):
        days = _days(by)
        if days is None:
            raise InvalidArgumentTypeError(
                f"step must be numeric, not {type(by).__name__}")
        if days == 0:
            raise ValueError("step can't be 0")
        self.start = start
        self.limit = limit
        self.by = days

    def __iter__(self):
        da = self.start
        if self.by > 0:
            while da <= self.limit:
                yield da
                da += self.by
        else:
            while da >= self.limit:
                yield da
                da += self.by

    def __repr__(self):
        return f"DateStep({self.start!r}, {self.limit!r}, {self.by})"
