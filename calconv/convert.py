#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 11:30:02 2025

Conversion between any two calendars by name.

Every conversion goes through the julian day number:
calendar A -> JDN -> calendar B.
"""

from functools import partial
from calconv.jdmath import gregorian_to_julian, julian_to_gregorian
from calconv.bahai import bahai_to_julian, julian_to_bahai
from calconv.persian import persian_to_julian, julian_to_persian
from calconv.hijri import hijri_to_julian, julian_to_hijri
from calconv.saka import saka_to_julian, julian_to_saka
from calconv.validate import check_calendar, validate_date, \
    validate_bahai_date

to_julian = {"gregorian": gregorian_to_julian,
             "bahai":     bahai_to_julian,
             "persian":   persian_to_julian,
             "hijri":     hijri_to_julian,
             "saka":      saka_to_julian}

from_julian = {"gregorian": julian_to_gregorian,
               "bahai":     julian_to_bahai,
               "persian":   julian_to_persian,
               "hijri":     julian_to_hijri,
               "saka":      julian_to_saka}

validators = {"gregorian": partial(validate_date, calendar="gregorian"),
              "bahai":     validate_bahai_date,
              "persian":   partial(validate_date, calendar="persian"),
              "hijri":     partial(validate_date, calendar="hijri"),
              "saka":      partial(validate_date, calendar="saka")}


def date_to_julian(calendar, *fields):
    """
    Julian day number of a date in the named calendar.

    Parameters
    ----------
    calendar : str
        "gregorian", "bahai", "persian", "hijri" or "saka".
    *fields : int
        (year, month, day), or (major, cycle, year, month, day) for the
        Bahai calendar.

    Raises
    ------
    ValueError
        Unknown calendar.
    InvalidYear, InvalidMonth, InvalidDay
        Invalid date.

    Returns
    -------
    float
        Julian day number.
    """
    validators[check_calendar(calendar)](*fields)
    return to_julian[calendar](*(int(field) for field in fields))


def julian_to_date(calendar, jd):
    return from_julian[check_calendar(calendar)](jd)


def convert(from_calendar, to_calendar, *fields):
    """
    Convert a date from one calendar to another.

    >>> convert("gregorian", "persian", 2015, 4, 16)
    PersianDate(year=1394, month=1, day=27)
    """
    check_calendar(to_calendar)
    return julian_to_date(to_calendar, date_to_julian(from_calendar, *fields))
