#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 10:12:45 2025

Month and day names.
"""

from calconv.constants import month_names, day_names as _day_names
from calconv.exceptions import InvalidMonth
from calconv.jdmath import day_of_week
from calconv.validate import check_calendar, validate_month


def month_name(month, calendar="gregorian"):
    """
    Name of a month number.

    Raises
    ------
    InvalidMonth
        If month is not a valid month number in the calendar.
    """
    validate_month(month, calendar)
    return month_names[calendar][int(month) - 1]


def month_number(name, calendar="gregorian"):
    """
    Month number of a month name. Case is ignored.

    Raises
    ------
    InvalidMonth
        If there is no month with this name.
    """
    names = month_names[check_calendar(calendar)]
    if isinstance(name, str):
        wanted = name.strip().lower()
        for number, candidate in enumerate(names, 1):
            if candidate.lower() == wanted:
                return number
    raise InvalidMonth(name)


def day_names(calendar="gregorian"):
    return _day_names[check_calendar(calendar)]


def day_name(jd, calendar="gregorian"):
    return day_names(calendar)[day_of_week(jd)]
