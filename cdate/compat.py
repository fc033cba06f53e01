#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 18 20:51:26 2025

Old names of date functions and methods. Each alias warns with a
DeprecationWarning and returns what the new name returns.
"""

import functools
import warnings

from cdate import validate
from cdate.calendar import is_julian, is_gregorian
from cdate.dt import Date, DateTime


def deprecated(new, newname):
    """Wrap new as an alias that warns that newname should be used."""
    def decorator(old):
        @functools.wraps(old)
        def alias(*args, **kwargs):
            warnings.warn(f"{old.__name__} is deprecated, use {newname}",
                          DeprecationWarning, stacklevel=2)
            return new(*args, **kwargs)
        return alias
    return decorator


@deprecated(is_julian, "is_julian")
def os_(jd, sg):
    pass


@deprecated(is_gregorian, "is_gregorian")
def ns_(jd, sg):
    pass


@deprecated(validate.valid_jd, "valid_jd")
def exist1(jd, sg=Date.ITALY):
    pass


@deprecated(validate.valid_ordinal, "valid_ordinal")
def exist2(year, yday, sg=Date.ITALY):
    pass


@deprecated(validate.valid_civil, "valid_civil")
def exist3(year, month, day, sg=Date.ITALY):
    pass


@deprecated(validate.valid_civil, "valid_civil")
def exist(year, month, day, sg=Date.ITALY):
    pass


@deprecated(validate.valid_commercial, "valid_commercial")
def existw(year, week, day, sg=Date.ITALY):
    pass


def _new0(ajd=0, of=0, sg=Date.ITALY):
    return DateTime._new(ajd, of, sg)


@deprecated(_new0, "DateTime.fromjd")
def new0(ajd=0, of=0, sg=Date.ITALY):
    """Value from its raw (ajd, of, sg) state."""


@deprecated(Date.fromjd, "Date.fromjd")
def new1(jd=0, sg=Date.ITALY):
    pass


@deprecated(Date.fromordinal, "Date.fromordinal")
def new2(year=-4712, yday=1, sg=Date.ITALY):
    pass


@deprecated(Date.fromcivil, "Date.fromcivil")
def new3(year=-4712, month=1, day=1, sg=Date.ITALY):
    pass


@deprecated(Date.fromcommercial, "Date.fromcommercial")
def neww(year=1582, week=41, day=5, sg=Date.ITALY):
    pass


# value methods, called with the value as first argument

@deprecated(lambda d: d.start, "start")
def sg(d):
    pass


@deprecated(Date.new_start, "new_start")
def newsg(d, sg=Date.ITALY):
    pass


@deprecated(lambda d: d.offset, "offset")
def of(d):
    pass


@deprecated(DateTime.new_offset, "new_offset")
def newof(d, of=0):
    pass
