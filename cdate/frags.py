#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 21:07:14 2025
"""

from fractions import Fraction
from functools import lru_cache
from numbers import Rational

from cdate.constants import UNIX_EPOCH, SPD
from cdate.validate import (valid_jd, valid_ordinal, valid_civil,
                            valid_commercial, valid_weeknum, valid_time)

"""
Completion of partial date fields, as produced by a date parser.

A field dict has some of the keys jd, year, yday, mon, mday, cwyear,
cweek, cwday, wnum0, wnum1, wday, hour, min, sec, sec_fraction, seconds
and offset. seconds (since the Unix epoch) and offset are in seconds,
sec_fraction is a fraction of a second.

The fields are first rewritten (seconds replaces all other date and time
fields), then completed: the group of fields in _groups with the most
fields present is taken as the representation of the date and its
missing fields are filled in from today's date. Finally the valid_*
checks give the Julian day number and the day fraction.
"""

_time_fields = ("hour", "min", "sec")

# Order matters: with an equal number of fields present, the first group
# wins.
_groups = (
    ("time",       ("hour", "min", "sec")),
    (None,         ("jd",)),
    ("ordinal",    ("year", "yday") + _time_fields),
    ("civil",      ("year", "mon", "mday") + _time_fields),
    ("commercial", ("cwyear", "cweek", "cwday") + _time_fields),
    ("wday",       ("wday",) + _time_fields),
    ("wnum0",      ("year", "wnum0", "wday") + _time_fields),
    ("wnum1",      ("year", "wnum1", "wday") + _time_fields),
    (None,         ("cwyear", "cweek", "wday") + _time_fields),
    (None,         ("year", "wnum0", "cwday") + _time_fields),
    (None,         ("year", "wnum1", "cwday") + _time_fields),
)

# field defaults used after filling the leading fields from today
_defaults = {
    "ordinal":    {"yday": 1},
    "civil":      {"mon": 1, "mday": 1},
    "commercial": {"cweek": 1, "cwday": 1},
    "wnum0":      {"wnum0": 0, "wday": 0},
    "wnum1":      {"wnum1": 0, "wday": 0},
}

_attrs = {"mon": "month", "mday": "day"}


def exact(x):
    """A number as an exact Fraction. Floats are read as decimals."""
    if isinstance(x, Rational):
        return Fraction(x)
    return Fraction(repr(float(x)))


def _present(elem, fields):
    return [f for f in fields if elem.get(f) is not None]


def _today_field(d, field):
    if field in _time_fields:
        return 0
    return getattr(d, _attrs.get(field, field))


def select_group(elem):
    """
    The group of fields that elem specifies most completely.

    Returns
    -------
    name : str or None
        Name of the group, None for a group that is not completed.
    fields : tuple
        Field names of the group.
    count : int
        Number of fields of the group present in elem.

    Returns None if no field of any group is present.
    """
    best = None
    for name, fields in _groups:
        count = len(_present(elem, fields))
        if count and (best is None or count > best[2]):
            best = (name, fields, count)
    return best


def rewrite_frags(elem):
    """
    Replace seconds since the Unix epoch by jd, hour, min, sec and
    sec_fraction (UTC). Returns a new dict.
    """
    elem = dict(elem or {})
    seconds = elem.pop("seconds", None)
    if seconds is not None:
        d, fr = divmod(exact(seconds), SPD)
        hour, fr = divmod(fr, 3600)
        minute, fr = divmod(fr, 60)
        sec, fr = divmod(fr, 1)
        elem["jd"] = UNIX_EPOCH + d
        elem["hour"] = hour
        elem["min"] = minute
        elem["sec"] = sec
        elem["sec_fraction"] = fr
        elem.pop("offset", None)
    return elem


def complete_frags(elem, today, with_time=False):
    """
    Fill in the missing fields of elem. Returns a new dict.

    Parameters
    ----------
    elem : dict
        Date and time fields.
    today : callable
        Returns today's Date. Only called when a date field is missing.
    with_time : bool
        True for date-times: a time without a date is taken to be today.
    """
    elem = dict(elem)
    group = select_group(elem)
    today = lru_cache(maxsize=1)(today)

    if group is not None:
        name, fields, count = group
        if name not in (None, "time") and count < len(fields):
            if name == "ordinal":
                if elem.get("year") is None:
                    elem["year"] = today().year
            elif name == "wday":
                if elem.get("jd") is None:
                    d = today()
                    elem["jd"] = d.jd - d.wday + elem["wday"]
            else:
                for field in fields:
                    if elem.get(field) is not None:
                        break
                    elem[field] = _today_field(today(), field)
            for field, value in _defaults.get(name, {}).items():
                if elem.get(field) is None:
                    elem[field] = value

        if name == "time" and with_time:
            if elem.get("jd") is None:
                elem["jd"] = today().jd

    for field in _time_fields:
        if elem.get(field) is None:
            elem[field] = 0
    elem["sec"] = min(elem["sec"], 59)  # no leap seconds
    return elem


def valid_date_frags(elem, sg):
    """
    The Julian day number of the first complete and valid representation
    in elem (jd, ordinal, civil, commercial, week numbers), or None.
    """
    get = elem.get

    if get("jd") is not None:
        return valid_jd(get("jd"), sg)

    year, yday = get("year"), get("yday")
    if year is not None and yday is not None:
        jd = valid_ordinal(year, yday, sg)
        if jd is not None:
            return jd

    year, mon, mday = get("year"), get("mon"), get("mday")
    if None not in (year, mon, mday):
        jd = valid_civil(year, mon, mday, sg)
        if jd is not None:
            return jd

    cwyear, cweek, cwday = get("cwyear"), get("cweek"), get("cwday")
    if cwday is None and get("wday") is not None:
        cwday = get("wday") or 7
    if None not in (cwyear, cweek, cwday):
        jd = valid_commercial(cwyear, cweek, cwday, sg)
        if jd is not None:
            return jd

    year, wnum0, wday = get("year"), get("wnum0"), get("wday")
    if wday is None and get("cwday") is not None:
        wday = get("cwday") % 7
    if None not in (year, wnum0, wday):
        jd = valid_weeknum(year, wnum0, wday, 0, sg)
        if jd is not None:
            return jd

    # weeks starting at Monday count days from Monday
    year, wnum1, wday = get("year"), get("wnum1"), get("wday")
    if wday is not None:
        wday = (wday - 1) % 7
    if wday is None and get("cwday") is not None:
        wday = (get("cwday") - 1) % 7
    if None not in (year, wnum1, wday):
        jd = valid_weeknum(year, wnum1, wday, 1, sg)
        if jd is not None:
            return jd

    return None


def valid_time_frags(elem):
    return valid_time(elem["hour"], elem["min"], elem["sec"])
