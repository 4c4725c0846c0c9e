#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 14 18:22:03 2025

The Bahai (Badi) calendar.

Years count from the vernal equinox of 1844 (BE 1 starts 1844-3-21). A Bahai
date is (major, cycle, year, month, day): a major cycle (Kull-i-Shay) of 361
years holds 19 cycles (Vahid) of 19 years. A year has 19 months of 19 days
followed by the intercalary days Ayyam-i-Ha, counted here as month 20. The
year starts the day after Gregorian March 20, so Ayyam-i-Ha has 5 days when
the following Gregorian year is a leap year and 4 days otherwise.
"""

from math import floor
from collections import namedtuple
from calconv.constants import BAHAI_START_YEAR
from calconv.jdmath import gregorian_to_julian, julian_to_gregorian, \
    is_gregorian_leap_year
from calconv.validate import validate_bahai_date, validate_date

BahaiDate = namedtuple("BahaiDate", ["major", "cycle", "year", "month", "day"])

MONTH_DAYS = 19
CYCLE_YEARS = 19
MAJOR_YEARS = 361


def get_major_cycle_year(bahai_year):
    """
    Split a year count into (major, cycle, year).

    Parameters
    ----------
    bahai_year : int
        Number of years since 1844 (0 for BE 1).

    Returns
    -------
    major, cycle, year
    """
    major = floor(bahai_year / MAJOR_YEARS) + 1
    cycle = floor((bahai_year % MAJOR_YEARS) / CYCLE_YEARS) + 1
    year = (bahai_year % CYCLE_YEARS) + 1
    return major, cycle, year


def bahai_year(major, cycle, year):
    """The BE year (1 for 1844) of (major, cycle, year)."""
    return MAJOR_YEARS * (major - 1) + CYCLE_YEARS * (cycle - 1) + year


def _gregorian_year(major, cycle, year):
    # Gregorian year in which the Bahai year starts
    return bahai_year(major, cycle, year) - 1 + BAHAI_START_YEAR


def bahai_to_julian(major, cycle, year, month, day):
    """
    Julian day number of a Bahai date.

    Month n starts 19 * (n-1) days after Naw-Ruz, the day after March 20
    of the Gregorian year the Bahai year starts in. Month 20 (Ayyam-i-Ha)
    follows the 19th month.

    Returns
    -------
    float
        Julian day number (x.5).
    """
    gy = _gregorian_year(major, cycle, year)
    return gregorian_to_julian(gy, 3, 20) + MONTH_DAYS * (month - 1) + day


def julian_to_bahai(jd):
    """
    Bahai date of julian day jd.

    Returns
    -------
    BahaiDate
        (major, cycle, year, month, day)
    """
    jd = floor(jd - 0.5) + 0.5
    gy = julian_to_gregorian(jd).year
    # January 1 until March 20 belong to the year that started the year before
    if jd <= gregorian_to_julian(gy, 3, 20):
        count = gy - BAHAI_START_YEAR - 1
    else:
        count = gy - BAHAI_START_YEAR
    major, cycle, year = get_major_cycle_year(count)
    days = jd - bahai_to_julian(major, cycle, year, 1, 1)
    month = int(days // MONTH_DAYS) + 1
    day = int(jd - bahai_to_julian(major, cycle, year, month, 1)) + 1
    return BahaiDate(major, cycle, year, month, day)


def days_in_bahai_month_year(month, major, cycle, year):
    """
    Number of days in a Bahai month: 19, or 4 or 5 for Ayyam-i-Ha.

    Parameters
    ----------
    month : int
        Month 1..20, 20 is Ayyam-i-Ha.
    major, cycle, year : int
        The Bahai year.

    Returns
    -------
    int
        Number of days.
    """
    if month != 20:
        return MONTH_DAYS
    if is_gregorian_leap_year(_gregorian_year(major, cycle, year) + 1):
        return 5
    return 4


def gregorian_to_bahai(year, month, day):
    validate_date(year, month, day)
    year, month, day = int(year), int(month), int(day)
    return julian_to_bahai(gregorian_to_julian(year, month, day))


def bahai_to_gregorian(major, cycle, year, month, day):
    validate_bahai_date(major, cycle, year, month, day)
    major, cycle, year = int(major), int(cycle), int(year)
    month, day = int(month), int(day)
    return julian_to_gregorian(bahai_to_julian(major, cycle, year, month, day))
