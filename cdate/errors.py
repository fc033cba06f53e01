#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar  6 20:31:05 2025
"""


class CdateError(Exception):
    """Base error."""


class InvalidDateError(CdateError, ValueError):
    """Raised when fields do not denote a real calendar day."""


class InvalidArgumentTypeError(CdateError, TypeError):
    """Raised when an operand or argument has the wrong kind."""
