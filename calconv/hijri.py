#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 11:03:56 2025

The tabular Islamic (Hijri) calendar.

An arithmetic approximation of the lunar calendar: months alternate between
30 and 29 days, and 11 years in each 30 year cycle are leap years in which
Dhu al-Hijja has 30 days. No lunar observation is involved.
"""

from math import floor, ceil
from collections import namedtuple
from calconv.constants import HIJRI_EPOCH, HIJRI_LEAP_YEARS
from calconv.cnumba import cnjit
from calconv.jdmath import gregorian_to_julian, julian_to_gregorian
from calconv.validate import validate_date

HijriDate = namedtuple("HijriDate", ["year", "month", "day"])


@cnjit
def hijri_to_julian(year:int, month:int, day:int) -> float:
    return day + ceil(29.5 * (month - 1)) + (year - 1) * 354 \
        + floor((3 + 11 * year) / 30) + HIJRI_EPOCH - 1


@cnjit
def _julian_to_hijri(jd):
    wjd = floor(jd - 0.5) + 0.5
    year = floor((30 * (wjd - HIJRI_EPOCH) + 10646) / 10631)
    month = min(12, ceil((wjd - (29 + hijri_to_julian(year, 1, 1))) / 29.5) + 1)
    day = wjd - hijri_to_julian(year, month, 1) + 1
    return year, month, int(day)


def julian_to_hijri(jd:float) -> HijriDate:
    """
    Hijri date of julian day jd.

    Returns
    -------
    HijriDate
        (year, month, day)
    """
    return HijriDate(*_julian_to_hijri(jd))


def is_hijri_leap_year(year:int) -> bool:
    """
    Leap year test of the tabular Hijri calendar: years 2, 5, 7, 10, 13, 16,
    18, 21, 24, 26 and 29 of each 30 year cycle are leap years.

    Parameters
    ----------
    year : int
        Hijri year.

    Returns
    -------
    bool
        True if Dhu al-Hijja of year has 30 days.
    """
    return year % 30 in HIJRI_LEAP_YEARS


def days_in_hijri_year(year):
    return 355 if is_hijri_leap_year(year) else 354


def days_in_hijri_month_year(month, year):
    """
    Number of days in a Hijri month. Odd months have 30 days, even months
    29, and Dhu al-Hijja (12) has 30 in a leap year.
    """
    if month % 2 == 1 or (month == 12 and is_hijri_leap_year(year)):
        return 30
    return 29


def gregorian_to_hijri(year, month, day):
    validate_date(year, month, day)
    year, month, day = int(year), int(month), int(day)
    return julian_to_hijri(gregorian_to_julian(year, month, day))


def hijri_to_gregorian(year, month, day):
    validate_date(year, month, day, "hijri")
    year, month, day = int(year), int(month), int(day)
    return julian_to_gregorian(hijri_to_julian(year, month, day))
