#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 23 14:06:21 2025
"""


import numpy as np
import pytest
from calconv.printer import *
from calconv.constants import gregorian_days, ANSI_RESET
from calconv.exceptions import InvalidMonth


def test_month_grid():
    grid = month_grid(3, 30)
    assert(grid.shape == (5, 7))
    assert(list(grid[0]) == [0, 0, 0, 1, 2, 3, 4])
    assert(list(grid[-1]) == [26, 27, 28, 29, 30, 0, 0])
    assert(np.count_nonzero(grid) == 30)
    assert(month_grid(0, 28).shape == (4, 7))
    assert(month_grid(6, 31).shape == (6, 7))

def test_month_grid_invalid():
    with pytest.raises(ValueError):
        month_grid(7, 30)
    with pytest.raises(ValueError):
        month_grid(0, 0)

def test_create_calendar():
    text = create_calendar(3, 30, "April", gregorian_days, 2015, "CE")
    lines = text.rstrip("\n").split("\n")
    width = len(lines[0])
    assert(all(len(line) == width for line in lines))
    assert(width == 7 * (len("Wednesday") + 3) + 1)
    assert(lines[0] == "+" + "-" * (width - 2) + "+")
    assert("April [2015 CE]" in lines[1])
    assert(lines[3].startswith("|    Sunday |"))
    assert(lines[5].split("|")[4].strip() == "1")
    assert(lines[5].split("|")[1].strip() == "")
    assert(len(lines) == 5 + 2 * 5)
    assert(ANSI_RESET not in text)

def test_create_calendar_color():
    text = create_calendar(0, 31, "May", gregorian_days, 2015, color=True)
    assert(ANSI_RESET in text)
    assert("\033[" in text)
    assert("May [2015]" in text)

def test_month_calendar():
    text = month_calendar("gregorian", 2015, 4)
    assert("April [2015 CE]" in text)
    assert(" 30 |" in text and " 31 |" not in text)
    text = month_calendar("persian", 1394, 1)
    assert("Farvardin [1394 AP]" in text)
    assert(" 31 |" in text)
    text = month_calendar("hijri", 1436, 9)
    assert("Ramadan [1436 AH]" in text)
    text = month_calendar("saka", 1937, 1)
    assert("Chaitra [1937 Saka]" in text)
    assert(" 30 |" in text and " 31 |" not in text)

def test_month_calendar_bahai():
    text = month_calendar("bahai", 172, 1)
    assert("Baha [172 BE]" in text)
    lines = text.rstrip("\n").split("\n")
    # Naw-Ruz 172 (2015-3-21) is a Saturday, the last column
    assert(lines[5].split("|")[7].strip() == "1")
    text = month_calendar("bahai", 172, 20)
    assert("Ayyam-i-Ha [172 BE]" in text)
    assert(" 5 |" in text)

def test_month_calendar_invalid():
    with pytest.raises(InvalidMonth):
        month_calendar("gregorian", 2015, 13)
    with pytest.raises(ValueError):
        month_calendar("mayan", 2015, 1)
