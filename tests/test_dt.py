#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 11:40:52 2025
"""


import copy
import pickle
from datetime import timedelta
from fractions import Fraction
from cdate.dt import *
from cdate.errors import InvalidDateError, InvalidArgumentTypeError
import pytest


def test_date():
    assert(Date(2000, 2, 29).jd == 2451604)
    assert(Date().jd == 0)
    assert(Date(2000, 1, 1).ajd == Fraction(4903089, 2))
    with pytest.raises(InvalidDateError):
        Date(1900, 2, 29)
    with pytest.raises(ValueError):
        Date(1582, 10, 10)
    with pytest.raises(InvalidArgumentTypeError):
        Date(2000.0, 1, 1)
    with pytest.raises(InvalidArgumentTypeError):
        Date(2000, 1, 1, sg=True)

def test_constructors():
    assert(Date.fromjd(0) == Date(-4712, 1, 1))
    assert(Date.frommjd(0) == Date(1858, 11, 17))
    assert(Date.fromordinal(2000, -1) == Date(2000, 12, 31))
    assert(Date.fromordinal(2000, 60) == Date(2000, 2, 29))
    assert(Date.fromcivil(2001, -1, -1) == Date(2001, 12, 31))
    assert(Date.fromcommercial(2004, 53, 6) == Date(2005, 1, 1))
    assert(Date.fromcommercial() == Date(1582, 10, 15))
    assert(Date.fromweeknum(2025, 1, 0, 0) == Date(2025, 1, 5))
    assert(Date.fromweeknum(2025, 1, 0, 1) == Date(2025, 1, 6))
    with pytest.raises(InvalidDateError):
        Date.fromcommercial(2003, 53, 1)
    with pytest.raises(InvalidDateError):
        Date.fromordinal(2001, 366)
    with pytest.raises(InvalidDateError):
        Date.fromweeknum(2025, 0, 2, 0)

def test_fields():
    d = Date(2025, 1, 11)
    assert(d.civil == (2025, 1, 11))
    assert((d.year, d.month, d.day) == (2025, 1, 11))
    assert((d.mon, d.mday) == (1, 11))
    assert(d.yday == 11)
    assert(d.ordinal == (2025, 11))
    assert(d.wday == 6)
    assert(d.weekday() == 5)
    assert(d.isoweekday() == 6)
    assert((d.cwyear, d.cweek, d.cwday) == (2025, 2, 6))
    assert(d.isocalendar() == (2025, 2, 6))
    assert(d.wnum0 == 1)
    assert(d.wnum1 == 1)
    assert(d.mjd == 60686)
    assert(d.ld == 2460687 - 2299160)
    assert(d.amjd == 60686)
    assert(d.day_fraction == 0)
    assert(d.offset == 0)
    assert(d.start == ITALY)

def test_isocalendar():
    assert(Date(2003, 12, 22).isocalendar() == (2003, 52, 1))
    assert(Date(2008, 12, 29).isocalendar() == (2009, 1, 1))
    assert(Date(2009, 12, 28).isocalendar() == (2009, 53, 1))
    assert(Date(2010, 1, 3).isocalendar() == (2009, 53, 7))

def test_immutable():
    d = Date(2000, 1, 1)
    with pytest.raises(AttributeError):
        d.year = 2001
    with pytest.raises(AttributeError):
        d._ajd = 0
    with pytest.raises(AttributeError):
        del d._ajd
    assert(d.year == 2000)

def test_add():
    d = Date(2000, 1, 1)
    assert(d + 31 == Date(2000, 2, 1))
    assert(31 + d == Date(2000, 2, 1))
    assert(d - 1 == Date(1999, 12, 31))
    assert(d.add_days(366) == Date(2001, 1, 1))
    assert(d.subtract_days(-1) == Date(2000, 1, 2))
    assert(d + timedelta(days=2) == Date(2000, 1, 3))
    assert(Date(1582, 10, 4) + 1 == Date(1582, 10, 15))
    h = d + Fraction(1, 2)
    assert(h.jd == d.jd)
    assert(h.day_fraction == Fraction(1, 2))
    assert((d + 0.25).day_fraction == Fraction(1, 4))
    with pytest.raises(InvalidArgumentTypeError):
        d + d
    with pytest.raises(TypeError):
        d + "1"
    with pytest.raises(InvalidArgumentTypeError):
        d - "1"
    with pytest.raises(InvalidArgumentTypeError):
        d + True

def test_subtract():
    assert(Date(2000, 3, 1) - Date(2000, 1, 1) == 60)
    assert(Date(1582, 10, 15) - Date(1582, 10, 4) == 1)
    assert(Date(2000, 1, 1) - Date(2000, 3, 1) == -60)
    assert(DateTime(2000, 1, 1, 12) - Date(2000, 1, 1) == Fraction(1, 2))
    assert(isinstance(Date(2000, 3, 1) - Date(2000, 1, 1), Fraction))

def test_months():
    assert(Date(2001, 1, 31) >> 1 == Date(2001, 2, 28))
    assert(Date(2000, 1, 31) >> 1 == Date(2000, 2, 29))
    assert(Date(2000, 3, 31) << 1 == Date(2000, 2, 29))
    assert(Date(2000, 12, 15) >> 1 == Date(2001, 1, 15))
    assert(Date(2000, 1, 15) << 1 == Date(1999, 12, 15))
    assert(Date(2000, 1, 15) >> -13 == Date(1998, 12, 15))
    assert(Date(2000, 2, 29).next_year() == Date(2001, 2, 28))
    assert(Date(2000, 2, 29).prev_year(4) == Date(1996, 2, 29))
    assert(Date(2000, 5, 31).next_month() == Date(2000, 6, 30))
    assert(Date(2000, 5, 31).prev_month(3) == Date(2000, 2, 29))
    assert(Date(2000, 1, 1).next_day() == Date(2000, 1, 2))
    assert(Date(2000, 1, 1).prev_day(2) == Date(1999, 12, 30))
    assert(Date(2000, 1, 1).succ() == Date(2000, 1, 2))
    with pytest.raises(InvalidArgumentTypeError):
        Date(2000, 1, 1) >> 1.5

def test_months_reform():
    assert(Date(1582, 9, 10) >> 1 == Date(1582, 10, 15) + 5)
    assert(Date(1582, 9, 10) >> 1 == Date(1582, 10, 20))
    assert(Date(1500, 1, 29) >> 1 == Date(1500, 2, 29))

def test_compare():
    a = Date(2000, 1, 1)
    b = Date(2000, 1, 2)
    assert(a < b)
    assert(b > a)
    assert(a <= Date(2000, 1, 1))
    assert(a == Date(2000, 1, 1))
    assert(a != b)
    assert(hash(a) == hash(Date(2000, 1, 1)))
    assert(a == Fraction(4903089, 2))
    assert(a < 2451545)
    assert(a == DateTime(2000, 1, 1))
    assert((a == "2000-01-01") is False)
    assert(len({a, Date(2000, 1, 1), b}) == 2)
    with pytest.raises(TypeError):
        a < "2000-01-02"

def test_same_day():
    a = DateTime(2000, 1, 1, 0, 0, 0, of=Fraction(9, 24))
    b = DateTime(2000, 1, 1, 23, 0, 0)
    assert(a < b)
    assert(a.same_day(b))
    assert(a.same_day(2451545))
    assert(not a.same_day(Date(2000, 1, 2)))
    assert(not a.same_day("2000-01-01"))

def test_reform():
    d = Date(1582, 10, 15)
    assert(d.is_gregorian())
    assert(not d.is_julian())
    assert((d - 1).is_julian())
    assert(d.julian().civil == (1582, 10, 5))
    assert(d.julian().jd == d.jd)
    assert(d.julian() == d)
    assert(d.julian().start == JULIAN)
    assert(d.gregorian().start == GREGORIAN)
    assert(d.england().civil == (1582, 10, 5))
    assert(d.england().italy().civil == (1582, 10, 15))
    assert(d.new_start(ENGLAND).start == ENGLAND)
    assert(d.with_reform_point(2361222).start == ENGLAND)
    assert(Date(1752, 9, 2, ENGLAND) + 1 == Date(1752, 9, 14, ENGLAND))
    assert(d.fix_style() == GREGORIAN)
    with pytest.raises(InvalidArgumentTypeError):
        d.new_start("ENGLAND")

def test_is_leap():
    assert(Date(2000, 6, 1).is_leap())
    assert(not Date(1900, 6, 1).is_leap())
    assert(Date(1500, 6, 1).is_leap())
    assert(not Date(1500, 6, 1, GREGORIAN).is_leap())
    assert(Date(1900, 6, 1, JULIAN).is_leap())

def test_step():
    a = Date(2000, 1, 1)
    e = Date(2000, 1, 5)
    assert(list(a.step(e, 2)) == [a, a + 2, e])
    assert(list(a.upto(e)) == [a, a + 1, a + 2, a + 3, e])
    assert(list(e.downto(a)) == [e, e - 1, e - 2, e - 3, a])
    assert(list(e.step(a, -3)) == [e, e - 3])
    assert(list(a.step(e, -1)) == [])
    assert(list(e.upto(a)) == [])
    assert(list(a.step(a)) == [a])
    s = a.step(e)
    assert(list(s) == list(s))
    assert(list(a.step(e, timedelta(days=4))) == [a, e])
    with pytest.raises(ValueError):
        a.step(e, 0)
    with pytest.raises(InvalidArgumentTypeError):
        a.step(e, "1")

def test_text():
    assert(str(Date(2000, 1, 1)) == "2000-01-01")
    assert(Date(-4712, 1, 1).isoformat() == "-4712-01-01")
    assert(repr(Date(2000, 1, 1)) == "Date(2000, 1, 1, sg=ITALY)")
    assert(repr(Date(2000, 1, 1, GREGORIAN)) ==
           "Date(2000, 1, 1, sg=GREGORIAN)")
    dt = DateTime(2001, 2, 3, 4, 5, 6, of=Fraction(7, 24))
    assert(dt.isoformat() == "2001-02-03T04:05:06+07:00")
    dt = DateTime(2001, 2, 3, 4, 5, 6, of=Fraction(-11, 48))
    assert(str(dt) == "2001-02-03T04:05:06-05:30")

def test_pickle():
    d = Date(2000, 2, 29, ENGLAND)
    assert(pickle.loads(pickle.dumps(d)) == d)
    assert(pickle.loads(pickle.dumps(d)).start == ENGLAND)
    dt = DateTime(2001, 2, 3, 4, 5, 6, of=Fraction(1, 24))
    dt2 = pickle.loads(pickle.dumps(dt))
    assert(type(dt2) is DateTime)
    assert(dt2 == dt and dt2.offset == dt.offset and dt2.hour == 4)
    assert(copy.copy(dt).isoformat() == dt.isoformat())
    assert(copy.deepcopy(d) == d)

def test_datetime():
    dt = DateTime(2001, 2, 3, 4, 5, 6, of=Fraction(7, 24))
    assert((dt.year, dt.month, dt.day) == (2001, 2, 3))
    assert((dt.hour, dt.minute, dt.second) == (4, 5, 6))
    assert((dt.min, dt.sec, dt.sec_fraction) == (5, 6, 0))
    assert(dt.offset == Fraction(7, 24))
    assert(dt.time == (4, 5, 6, 0))
    assert(DateTime(2000, 1, 1, 12).ajd == 2451545)
    assert(DateTime(2000, 1, 1, 24, 0, 0) == DateTime(2000, 1, 2))
    assert(DateTime(2000, 1, 1, -1, -1, -1) == DateTime(2000, 1, 1, 23, 59, 59))
    assert(DateTime(2000, 1, 1, of=timedelta(hours=2)).offset == Fraction(1, 12))
    with pytest.raises(InvalidDateError):
        DateTime(2000, 1, 1, 24, 0, 1)
    with pytest.raises(InvalidDateError):
        DateTime(1582, 10, 10, 12)
    with pytest.raises(InvalidArgumentTypeError):
        DateTime(2000, 1, 1, 12.5)
    with pytest.raises(InvalidArgumentTypeError):
        DateTime(2000, 1, 1, of="+09:00")

def test_datetime_constructors():
    assert(DateTime.fromjd(2451545, 12).ajd == 2451545)
    assert(DateTime.frommjd(0, 0).amjd == 0)
    assert(DateTime.fromordinal(2000, 1, 6) == DateTime(2000, 1, 1, 6))
    assert(DateTime.fromcommercial(2004, 53, 6, 23, 59, 59) ==
           DateTime(2005, 1, 1, 23, 59, 59))
    assert(DateTime.fromweeknum(2025, 1, 0, 0, 1) == DateTime(2025, 1, 5, 1))

def test_new_offset():
    dt = DateTime(2001, 2, 3, 4, 5, 6, of=Fraction(7, 24))
    utc = dt.new_offset(0)
    assert(utc == dt)
    assert(utc.ajd == dt.ajd)
    assert(utc.civil == (2001, 2, 2))
    assert(utc.time[:3] == (21, 5, 6))
    assert(dt.with_offset(timedelta(hours=-5)).hour == 16)
    assert(not utc.same_day(dt))

def test_datetime_arithmetic():
    dt = DateTime(2001, 1, 31, 10, 30, 0, of=Fraction(1, 24))
    assert(dt >> 1 == DateTime(2001, 2, 28, 10, 30, 0, of=Fraction(1, 24)))
    assert((dt >> 1).offset == Fraction(1, 24))
    assert((dt + Fraction(1, 2)).hour == 22)
    assert((dt + timedelta(hours=14)).civil == (2001, 2, 1))
    assert(type(dt + 1) is DateTime)
    assert(DateTime(2000, 1, 2) - DateTime(2000, 1, 1, 18) == Fraction(1, 4))
    half = DateTime(2000, 1, 1) + Fraction(1, 2 * 86400)
    assert(half.second == 0)
    assert(half.sec_fraction == Fraction(1, 2))
    assert(list(DateTime(2000, 1, 1).step(DateTime(2000, 1, 2),
                                          Fraction(1, 2)))
           == [DateTime(2000, 1, 1), DateTime(2000, 1, 1, 12),
               DateTime(2000, 1, 2)])

def test_today():
    assert(Date.today(clock=lambda: 0, of=0) == Date(1970, 1, 1))
    assert(Date.today(clock=lambda: 86399, of=0) == Date(1970, 1, 1))
    assert(Date.today(clock=lambda: 43200, of=Fraction(1, 2)) ==
           Date(1970, 1, 2))
    assert(Date.today(clock=lambda: 0, of=Fraction(-1, 24)) ==
           Date(1969, 12, 31))
    assert(Date.today(GREGORIAN, lambda: 0, 0).start == GREGORIAN)
    assert(type(Date.today(clock=lambda: 0, of=0)) is Date)

def test_now():
    now = DateTime.now(clock=lambda: 86400 * 1.5, of=0)
    assert(now == DateTime(1970, 1, 2, 12, 0, 0))
    now = DateTime.now(clock=lambda: 0, of=Fraction(9, 24))
    assert(now.isoformat() == "1970-01-01T09:00:00+09:00")
    assert(now == DateTime(1970, 1, 1))
    assert(DateTime.now(clock=lambda: 0.25, of=0).sec_fraction ==
           Fraction(1, 4))
    now = DateTime.now(clock=lambda: Fraction(1, 3), of=0)
    assert(now.sec_fraction == Fraction(1, 3))

def test_fromtimestamp():
    assert(Date.fromtimestamp(951782400, 0) == Date(2000, 2, 29))
    dt = DateTime.fromtimestamp(951782400 + 3661, 0)
    assert(dt.time[:3] == (1, 1, 1))
    assert(DateTime.fromtimestamp(-1, 0) == DateTime(1969, 12, 31, 23, 59, 59))
    with pytest.raises(InvalidArgumentTypeError):
        Date.fromtimestamp(None)
