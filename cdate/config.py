#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:48:03 2025

Package defaults, read from config.ini next to this file or from the file
named in the CDATE_CONFIG environment variable.
"""

import logging
import os
from configparser import ConfigParser
from fractions import Fraction

from cdate.calendar import ITALY, Reform
from cdate.constants import SPD

logger = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = os.environ.get("CDATE_CONFIG", f"{path}.ini")


def read_config(filename):
    config = ConfigParser()
    found = config.read(filename)
    if not found:
        logger.warning("Configuration %s not found, using defaults.", filename)
    return config


def read_reform(config):
    """
    The default day of calendar reform, ITALY if not configured.
    """
    text = config.get("Calendar", "reform", fallback="italy")
    try:
        return Reform.parse(text)
    except ValueError:
        logger.warning("Invalid reform '%s' in configuration, using ITALY.",
                       text)
        return ITALY


def read_offset(config):
    """
    The default UTC offset as a fraction of a day.

    None means that the offset of the local time zone is used.
    """
    text = config.get("Clock", "offset", fallback="local").strip()
    if text.lower() == "local":
        return None
    try:
        return Fraction(int(text), SPD)
    except ValueError:
        logger.warning("Invalid offset '%s' in configuration, using local "
                       "time.", text)
        return None


config = read_config(config_filename)

DEFAULT_REFORM = read_reform(config)
DEFAULT_OFFSET = read_offset(config)
logger.debug("Default reform %r, default offset %s.", DEFAULT_REFORM,
             DEFAULT_OFFSET)
