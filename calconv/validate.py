#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 19:44:12 2025

Range checks for date fields.

The validators accept or reject, they never clamp or convert. A field is
accepted when it is an integer (anything supporting __index__, so numpy
integers too) or a string of decimal digits, and within the range of the
calendar. Booleans, floats and None are rejected.
"""

import re
from operator import index as _index
from calconv.constants import CALENDARS, BAHAI_START_YEAR
from calconv.jdmath import is_gregorian_leap_year
from calconv.exceptions import InvalidYear, InvalidMonth, InvalidDay

_digits = re.compile("[0-9]+")

# (low, high) per calendar
month_range = {"gregorian": (1, 12), "bahai": (1, 20), "persian": (1, 12),
               "hijri": (1, 12), "saka": (1, 12)}
day_range   = {"gregorian": (1, 31), "bahai": (1, 19), "persian": (1, 31),
               "hijri": (1, 30), "saka": (1, 31)}
AYYAM_I_HA_MAX = 5
BAHAI_CYCLE = 19
BAHAI_MAJOR = 361


def check_calendar(calendar):
    if calendar not in CALENDARS:
        raise ValueError(f"calendar not in {list(CALENDARS)}", calendar)
    return calendar


def _as_int(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if _digits.fullmatch(value):
            return int(value)
        return None
    try:
        return _index(value)
    except TypeError:
        return None


def _check(value, low, high, error):
    number = _as_int(value)
    if number is None or not low <= number <= high:
        raise error(value)


def validate_year(year, calendar="gregorian"):
    """
    Check a year. Years are positive in every calendar.

    Raises
    ------
    InvalidYear
        If year is missing, not a number or not positive.
    """
    check_calendar(calendar)
    number = _as_int(year)
    if number is None or number <= 0:
        raise InvalidYear(year)


def validate_month(month, calendar="gregorian"):
    """
    Check a month number: 1..12, or 1..20 for the Bahai calendar where
    month 20 holds the intercalary days (Ayyam-i-Ha).

    Raises
    ------
    InvalidMonth
    """
    low, high = month_range[check_calendar(calendar)]
    _check(month, low, high, InvalidMonth)


def validate_day(day, calendar="gregorian", month=None):
    """
    Check a day number: 1..31, 1..30 (Hijri) or 1..19 (Bahai).

    For Bahai month 20 the day must be in 1..5.

    Raises
    ------
    InvalidDay
    """
    low, high = day_range[check_calendar(calendar)]
    if calendar == "bahai" and _as_int(month) == 20:
        high = AYYAM_I_HA_MAX
    _check(day, low, high, InvalidDay)


def validate_date(year, month, day, calendar="gregorian"):
    validate_year(year, calendar)
    validate_month(month, calendar)
    validate_day(day, calendar, month)


def validate_bahai_date(major, cycle, year, month, day):
    """
    Check a Bahai date. major is positive, cycle and year are in 1..19.
    Ayyam-i-Ha (month 20) has 5 days when the Gregorian year after the one
    the Bahai year starts in is a leap year, 4 days otherwise.

    Raises
    ------
    InvalidYear, InvalidMonth, InvalidDay
    """
    validate_year(major, "bahai")
    _check(cycle, 1, BAHAI_CYCLE, InvalidYear)
    _check(year, 1, BAHAI_CYCLE, InvalidYear)
    validate_month(month, "bahai")
    validate_day(day, "bahai", month)
    if _as_int(month) == 20:
        gy = BAHAI_START_YEAR + BAHAI_MAJOR * (_as_int(major) - 1) \
            + BAHAI_CYCLE * (_as_int(cycle) - 1) + _as_int(year) - 1
        if _as_int(day) == AYYAM_I_HA_MAX and not is_gregorian_leap_year(gy + 1):
            raise InvalidDay(day)
