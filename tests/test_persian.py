#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 20 18:12:30 2025
"""


import pytest
from calconv.persian import *
from calconv.constants import PERSIAN_EPOCH
from calconv.jdmath import gregorian_to_julian
from calconv.exceptions import InvalidYear, InvalidMonth, InvalidDay


def test_epoch():
    assert(persian_to_julian(1, 1, 1) == PERSIAN_EPOCH)
    assert(julian_to_persian(PERSIAN_EPOCH) == (1, 1, 1))

def test_year_before_epoch():
    # there is no year zero
    assert(julian_to_persian(PERSIAN_EPOCH - 1) == (-1, 12, 30))

def test_nowruz():
    assert(persian_to_julian(1394, 1, 1) == 2457102.5)  # 2015-3-21
    assert(julian_to_persian(2457102.5) == (1394, 1, 1))
    assert(julian_to_persian(2457101.5) == (1393, 12, 29))

def test_julian_to_persian():
    date = julian_to_persian(2457128.5)  # 2015-4-16
    assert(date == (1394, 1, 27))
    assert((date.year, date.month, date.day) == (1394, 1, 27))

def test_julian_persian_invariant():
    for i in range(2415020, 2488070):  # 1900 until 2100
        jd = i + 0.5
        date = julian_to_persian(jd)
        assert(1 <= date.month <= 12)
        assert(persian_to_julian(*date) == jd)

def test_persian_julian_invariant():
    for year in (1, 2, 474, 475, 1300, 1394, 1403, 1404, 3293, 3294):
        for month in range(1, 13):
            for day in range(1, days_in_persian_month_year(month, year) + 1):
                jd = persian_to_julian(year, month, day)
                assert(julian_to_persian(jd) == (year, month, day))

def test_is_persian_leap_year():
    for year in range(1300, 1500):
        days = days_in_persian_month_year(12, year)
        assert(days == (30 if is_persian_leap_year(year) else 29))
    assert(is_persian_leap_year(1391) is True)
    assert(is_persian_leap_year(1394) is False)

def test_days_in_persian_month_year():
    for month in range(1, 7):
        assert(days_in_persian_month_year(month, 1394) == 31)
    for month in range(7, 12):
        assert(days_in_persian_month_year(month, 1394) == 30)
    assert(days_in_persian_month_year(12, 1394) == 29)

def test_gregorian_to_persian():
    assert(gregorian_to_persian(2015, 4, 16) == (1394, 1, 27))
    assert(gregorian_to_persian(2015, 4, 16) ==
           julian_to_persian(gregorian_to_julian(2015, 4, 16)))
    assert(gregorian_to_persian(2015, 3, 20) == (1393, 12, 29))

def test_persian_to_gregorian():
    assert(persian_to_gregorian(1394, 1, 27) == (2015, 4, 16))
    assert(persian_to_gregorian(1394, 1, 1) == (2015, 3, 21))

def test_string_fields():
    assert(gregorian_to_persian("2015", "4", "16") == (1394, 1, 27))
    assert(persian_to_gregorian("1394", "1", "27") == (2015, 4, 16))

def test_persian_to_gregorian_invalid():
    with pytest.raises(InvalidYear):
        persian_to_gregorian(0, 1, 1)
    with pytest.raises(InvalidMonth):
        persian_to_gregorian(1394, 13, 1)
    with pytest.raises(InvalidDay):
        persian_to_gregorian(1394, 1, 32)
    with pytest.raises(InvalidDay):
        gregorian_to_persian(2015, 4, 0)
