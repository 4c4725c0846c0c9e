#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 14 20:47:19 2025

The Persian (Jalali, Solar Hijri) calendar, arithmetic version.

Leap years are placed with the 2820 year grand cycle (Birashk). A grand
cycle has 1029983 days. The first six months have 31 days, the next five 30
and Esfand 29, or 30 in a leap year.

Years before the epoch are counted without a year zero: the year before 1
is -1.
"""

from math import floor, ceil
from collections import namedtuple
from calconv.constants import PERSIAN_EPOCH
from calconv.cnumba import cnjit
from calconv.jdmath import gregorian_to_julian, julian_to_gregorian
from calconv.validate import validate_date

PersianDate = namedtuple("PersianDate", ["year", "month", "day"])

GRAND_CYCLE = 2820
GRAND_CYCLE_DAYS = 1029983


@cnjit
def persian_to_julian(year:int, month:int, day:int) -> float:
    """
    Julian day number of a Persian date.

    Assumes that year, month and day are valid.
    """
    if year >= 0:
        epbase = year - 474
    else:
        epbase = year - 473
    epyear = 474 + epbase % GRAND_CYCLE
    if month <= 7:
        mdays = (month - 1) * 31
    else:
        mdays = (month - 1) * 30 + 6
    return day + mdays + (epyear * 682 - 110) // 2816 + (epyear - 1) * 365 \
        + (epbase // GRAND_CYCLE) * GRAND_CYCLE_DAYS + (PERSIAN_EPOCH - 1)


@cnjit
def _julian_to_persian(jd):
    wjd = floor(jd - 0.5) + 0.5
    depoch = int(wjd - persian_to_julian(475, 1, 1))
    cycle = depoch // GRAND_CYCLE_DAYS
    cyear = depoch % GRAND_CYCLE_DAYS
    if cyear == GRAND_CYCLE_DAYS - 1:   # last day of the grand cycle
        ycycle = GRAND_CYCLE
    else:
        aux1 = cyear // 366
        aux2 = cyear % 366
        ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1
    year = ycycle + GRAND_CYCLE * cycle + 474
    if year <= 0:
        year -= 1
    yday = wjd - persian_to_julian(year, 1, 1) + 1
    if yday <= 186:
        month = ceil(yday / 31)
    else:
        month = ceil((yday - 6) / 30)
    day = wjd - persian_to_julian(year, month, 1) + 1
    return year, month, int(day)


def julian_to_persian(jd:float) -> PersianDate:
    """
    Persian date of julian day jd.

    Returns
    -------
    PersianDate
        (year, month, day)
    """
    return PersianDate(*_julian_to_persian(jd))


def is_persian_leap_year(year:int) -> bool:
    """
    Leap year test of the 2820 year grand cycle.

    Parameters
    ----------
    year : int
        Persian year, no year zero.

    Returns
    -------
    bool
        True if Esfand of year has 30 days.
    """
    if year > 0:
        epbase = year - 474
    else:
        epbase = year - 473
    return ((epbase % GRAND_CYCLE + 474 + 38) * 682) % 2816 < 682


def days_in_persian_month_year(month, year):
    """
    Number of days in a Persian month, counted from the first of the month
    to the first of the next month.
    """
    if month == 12:
        next_year, next_month = year + 1, 1
    else:
        next_year, next_month = year, month + 1
    start = persian_to_gregorian(year, month, 1)
    end = persian_to_gregorian(next_year, next_month, 1)
    return int(gregorian_to_julian(*end) - gregorian_to_julian(*start))


def gregorian_to_persian(year, month, day):
    validate_date(year, month, day)
    year, month, day = int(year), int(month), int(day)
    return julian_to_persian(gregorian_to_julian(year, month, day))


def persian_to_gregorian(year, month, day):
    validate_date(year, month, day, "persian")
    year, month, day = int(year), int(month), int(day)
    return julian_to_gregorian(persian_to_julian(year, month, day))
