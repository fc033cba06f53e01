#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar  6 20:12:41 2025

Epochs and day-length constants. All values are exact (int or Fraction).
"""

from fractions import Fraction

mdays   = {1:31,2:28, 3:31, 4:30, 5:31, 6:30, 7:31, 8:31, 9:30, 10:31,
           11:30, 12:31}

ITALY_JD   = 2299161               # 1582-10-15, first Gregorian day in Italy
ENGLAND_JD = 2361222               # 1752-09-14, first Gregorian day in England

MJD_EPOCH  = 2400001               # JD of MJD 0 (1858-11-17)
LD_EPOCH   = 2299160               # JD of Lilian day 0 (1582-10-14)
UNIX_EPOCH = 2440588               # JD of 1970-01-01
AMJD_EPOCH = Fraction(4800001, 2)  # ajd of amjd 0 (1858-11-17T00:00Z)

HALF    = Fraction(1, 2)

HPD     = 24                       # hours per day
MPD     = 1440                     # minutes per day
SPD     = 86400                    # seconds per day
USPD    = SPD * 1000000            # microseconds per day

DAY_HOUR   = Fraction(1, HPD)
DAY_MINUTE = Fraction(1, MPD)
DAY_SECOND = Fraction(1, SPD)
