#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 20:05:37 2025

Julian day math for the proleptic Gregorian calendar.

A Julian day number (JDN) counts days continuously. A julian day starts at
mean noon, a civil day at midnight, so the JDN of a date is a half integer:
the JDN of 1-1-1 (Gregorian) is 1721425.5. All other calendars convert
through the JDN.

The algorithms follow the calendar converter of John Walker (fourmilab).
Years are positive; month and day are assumed to be valid.
"""

from math import floor
from collections import namedtuple
from calconv.constants import GREGORIAN_EPOCH, gregorian_days, mdays
from calconv.cnumba import cnjit

GregorianDate = namedtuple("GregorianDate", ["year", "month", "day"])


@cnjit
def is_gregorian_leap_year(year:int) -> bool:
    """
    Check if a year is a leap year in the (proleptic) Gregorian calendar.

    Parameters
    ----------
    year : int

    Returns
    -------
    bool
        True if february has 29 days.
    """
    return (year % 4 == 0) and not (year % 100 == 0 and year % 400 != 0)


@cnjit
def gregorian_to_julian(year:int, month:int, day:int) -> float:
    """
    Julian day number of a Gregorian date.

    Assumes that year, month and day are valid.

    Parameters
    ----------
    year  : int
            Year (positive).
    month : int
            Month (1-12).
    day   : int
            Day of the month.

    Returns
    -------
    float
        The julian day number at midnight (x.5).
    """
    y = year - 1
    if month <= 2:
        leapadj = 0
    elif is_gregorian_leap_year(year):
        leapadj = -1
    else:
        leapadj = -2
    return (GREGORIAN_EPOCH - 1) + 365 * y + y // 4 - y // 100 + y // 400 \
        + (367 * month - 362) // 12 + leapadj + day


@cnjit
def _julian_to_gregorian(jd):
    wjd = floor(jd - 0.5) + 0.5          # midnight at the start of the day
    depoch = int(wjd - GREGORIAN_EPOCH)
    quadricent = depoch // 146097
    dqc = depoch % 146097
    cent = dqc // 36524
    dcent = dqc % 36524
    quad = dcent // 1461
    dquad = dcent % 1461
    yindex = dquad // 365
    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):  # else the last day of a leap year
        year += 1
    yearday = wjd - gregorian_to_julian(year, 1, 1)
    if wjd < gregorian_to_julian(year, 3, 1):
        leapadj = 0
    elif is_gregorian_leap_year(year):
        leapadj = 1
    else:
        leapadj = 2
    month = floor(((yearday + leapadj) * 12 + 373) / 367)
    day = wjd - gregorian_to_julian(year, month, 1) + 1
    return year, month, int(day)


def julian_to_gregorian(jd:float) -> GregorianDate:
    """
    Reverse Julian day. Compute the Gregorian date of julian day jd.

    The fraction of jd is ignored: jd is moved to the midnight that starts
    its day. julian_to_gregorian(gregorian_to_julian(y, m, d)) is an
    invariant.

    Parameters
    ----------
    jd : float
         Julian day.

    Returns
    -------
    GregorianDate
        (year, month, day)
    """
    return GregorianDate(*_julian_to_gregorian(jd))


@cnjit
def day_of_week(jd:float) -> int:
    """
    Weekday number of julian day jd.

    Returns
    -------
    int
        0: Sunday
        1: Monday
        2: Tuesday
        3: Wednesday
        4: Thursday
        5: Friday
        6: Saturday
    """
    return floor(jd + 1.5) % 7


def weekday_str(jd):
    return gregorian_days[day_of_week(jd)]


def days_in_gregorian_month_year(month, year):
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return mdays[month]


def gregorian_day_of_year(year, month, day):
    return int(gregorian_to_julian(year, month, day)
               - gregorian_to_julian(year, 1, 1)) + 1
