#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 16:40:12 2025

The Indian national (Saka) calendar.

A Saka year starts on March 22 of Gregorian year + 78, or March 21 when
that Gregorian year is a leap year. Chaitra has 30 days (31 in a leap year),
the next five months 31 days and the last six months 30 days.
"""

from math import floor
from collections import namedtuple
from calconv.constants import SAKA_START, SAKA_OFFSET
from calconv.jdmath import gregorian_to_julian, julian_to_gregorian, \
    is_gregorian_leap_year
from calconv.validate import validate_date

SakaDate = namedtuple("SakaDate", ["year", "month", "day"])

LONG_MONTHS = 31 * 5       # Vaisakha..Bhadra


def days_in_chaitra(gregorian_year):
    """
    Number of days in Chaitra, the first Saka month.

    Parameters
    ----------
    gregorian_year : int
        Gregorian year in which the Saka year starts (Saka year + 78).

    Returns
    -------
    int
        31 if gregorian_year is a Gregorian leap year, 30 otherwise.
    """
    return 31 if is_gregorian_leap_year(gregorian_year) else 30


def saka_to_julian(year, month, day):
    """
    Julian day number of a Saka date.

    Assumes that year, month and day are valid.
    """
    gy = year + SAKA_OFFSET
    if is_gregorian_leap_year(gy):
        start = gregorian_to_julian(gy, 3, 21)
    else:
        start = gregorian_to_julian(gy, 3, 22)
    if month == 1:
        return start + (day - 1)
    jd = start + days_in_chaitra(gy)
    jd += min(month - 2, 5) * 31
    if month >= 8:
        jd += (month - 7) * 30
    return jd + (day - 1)


def julian_to_saka(jd):
    """
    Saka date of julian day jd.

    Returns
    -------
    SakaDate
        (year, month, day)
    """
    jd = floor(jd - 0.5) + 0.5
    gy = julian_to_gregorian(jd).year
    yday = int(jd - gregorian_to_julian(gy, 1, 1))
    chaitra = days_in_chaitra(gy)
    year = gy - SAKA_OFFSET
    if yday < SAKA_START:
        # before Chaitra 1, only the days after Chaitra are used below
        year -= 1
        yday += chaitra + 31 * 5 + 30 * 3 + 10 + SAKA_START
    yday -= SAKA_START
    if yday < chaitra:
        return SakaDate(year, 1, yday + 1)
    mday = yday - chaitra
    if mday < LONG_MONTHS:
        return SakaDate(year, mday // 31 + 2, mday % 31 + 1)
    mday -= LONG_MONTHS
    return SakaDate(year, mday // 30 + 7, mday % 30 + 1)


def days_in_saka_month_year(month, year):
    """
    Number of days in a Saka month, counted from the first of the month
    to the first of the next month.
    """
    if month == 12:
        next_year, next_month = year + 1, 1
    else:
        next_year, next_month = year, month + 1
    start = saka_to_gregorian(year, month, 1)
    end = saka_to_gregorian(next_year, next_month, 1)
    return int(gregorian_to_julian(*end) - gregorian_to_julian(*start))


def gregorian_to_saka(year, month, day):
    validate_date(year, month, day)
    year, month, day = int(year), int(month), int(day)
    return julian_to_saka(gregorian_to_julian(year, month, day))


def saka_to_gregorian(year, month, day):
    validate_date(year, month, day, "saka")
    year, month, day = int(year), int(month), int(day)
    return julian_to_gregorian(saka_to_julian(year, month, day))
