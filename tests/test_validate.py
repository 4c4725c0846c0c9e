#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 22 10:18:37 2025
"""


import numpy as np
import pytest
from calconv.validate import *
from calconv.exceptions import InvalidDate, InvalidYear, InvalidMonth, \
    InvalidDay


def test_validate_year():
    validate_year(1)
    validate_year(2015)
    validate_year("2015")
    validate_year(np.int64(2015))
    for year in (0, -1, None, "", "-1", "20a5", 2015.0, True, [2015]):
        with pytest.raises(InvalidYear):
            validate_year(year)

def test_validate_month():
    validate_month(1)
    validate_month(12)
    validate_month("12")
    for month in (0, 13, -1, None, "abc", 1.5):
        with pytest.raises(InvalidMonth):
            validate_month(month)
    validate_month(20, "bahai")
    with pytest.raises(InvalidMonth):
        validate_month(21, "bahai")
    with pytest.raises(InvalidMonth):
        validate_month(13, "persian")

def test_validate_day():
    validate_day(1)
    validate_day(31)
    for day in (0, 32, None, "x"):
        with pytest.raises(InvalidDay):
            validate_day(day)
    validate_day(30, "hijri")
    with pytest.raises(InvalidDay):
        validate_day(31, "hijri")
    validate_day(19, "bahai")
    with pytest.raises(InvalidDay):
        validate_day(20, "bahai")
    validate_day(5, "bahai", 20)
    with pytest.raises(InvalidDay):
        validate_day(6, "bahai", 20)
    validate_day(31, "saka")

def test_validate_date():
    validate_date(2015, 4, 16)
    validate_date(1394, 12, 30, "persian")
    with pytest.raises(InvalidYear):
        validate_date(0, 4, 16)
    with pytest.raises(InvalidMonth):
        validate_date(2015, 13, 16)
    with pytest.raises(InvalidDay):
        validate_date(2015, 4, 32)

def test_validate_bahai_date():
    validate_bahai_date(1, 10, 1, 1, 1)
    validate_bahai_date(1, 10, 1, 20, 5)     # 2016 is a leap year
    validate_bahai_date("1", "10", "2", "20", "4")
    with pytest.raises(InvalidYear):
        validate_bahai_date(0, 10, 1, 1, 1)
    with pytest.raises(InvalidYear):
        validate_bahai_date(1, 0, 1, 1, 1)
    with pytest.raises(InvalidYear):
        validate_bahai_date(1, 10, 20, 1, 1)
    with pytest.raises(InvalidMonth):
        validate_bahai_date(1, 10, 1, 0, 1)
    with pytest.raises(InvalidDay):
        validate_bahai_date(1, 10, 1, 1, 0)
    with pytest.raises(InvalidDay):
        validate_bahai_date(1, 10, 2, 20, 5)     # 2017 is not
    with pytest.raises(InvalidDay):
        validate_bahai_date(1, 19, 19, 20, 5)

def test_unknown_calendar():
    with pytest.raises(ValueError):
        validate_month(1, "mayan")
    with pytest.raises(ValueError):
        check_calendar("julian")

def test_error_value():
    with pytest.raises(InvalidMonth) as excinfo:
        validate_month(13)
    assert(excinfo.value.value == 13)
    assert(str(excinfo.value) == "Invalid month [13].")
    with pytest.raises(InvalidYear) as excinfo:
        validate_year(None)
    assert(excinfo.value.value is None)
    assert(str(excinfo.value) == "Invalid year [].")

def test_error_hierarchy():
    for error in (InvalidYear, InvalidMonth, InvalidDay):
        assert(issubclass(error, InvalidDate))
        assert(issubclass(error, ValueError))

def test_failure_does_not_affect_next_call():
    with pytest.raises(InvalidDay):
        validate_day(32)
    validate_day(31)
