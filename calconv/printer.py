#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 17 21:14:26 2025

Text calendar of a month, optionally colored with ANSI escape sequences.

Colors and the minimum cell width are read from printer.ini.
"""

import os
import numpy as np
from configparser import ConfigParser
from calconv import constants
from calconv.constants import ansi_colors, ANSI_RESET
from calconv.convert import date_to_julian
from calconv.jdmath import day_of_week, days_in_gregorian_month_year
from calconv.bahai import get_major_cycle_year, days_in_bahai_month_year
from calconv.persian import days_in_persian_month_year
from calconv.hijri import days_in_hijri_month_year
from calconv.saka import days_in_saka_month_year
from calconv.names import month_name
from calconv.validate import check_calendar, validate_year


path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

colors    = {part: config["Colors"][part]
             for part in ("border", "title", "days", "dates")}
bold      = config["Colors"].getboolean("bold")
min_width = config["Layout"].getint("min_width")

days_in_month = {"gregorian": days_in_gregorian_month_year,
                 "persian":   days_in_persian_month_year,
                 "hijri":     days_in_hijri_month_year,
                 "saka":      days_in_saka_month_year}


def _sgr(part):
    name = colors[part].lower()
    if name not in ansi_colors:
        print(f"Warning: unknown color {name} in {config_filename}. "
              "Using no color.")
        return ""
    if bold:
        return f"\033[1;{ansi_colors[name]}m"
    return f"\033[{ansi_colors[name]}m"


def _painter(color):
    if not color:
        return lambda part, text: text
    codes = {part: _sgr(part) for part in colors}

    def paint(part, text):
        if not codes[part]:
            return text
        return f"{codes[part]}{text}{ANSI_RESET}"
    return paint


def month_grid(start_index, days):
    """
    Day numbers of a month laid out in weeks.

    Parameters
    ----------
    start_index : int
        Weekday of the first day (0 is Sunday), the number of empty cells
        before it.
    days : int
        Number of days in the month.

    Returns
    -------
    numpy.ndarray
        Array of shape (weeks, 7), 0 in empty cells.
    """
    if not 0 <= start_index <= 6:
        raise ValueError("start_index must be in 0..6", start_index)
    if days < 1:
        raise ValueError("days must be positive", days)
    weeks = -(-(start_index + days) // 7)
    cells = np.zeros(weeks * 7, dtype=int)
    cells[start_index:start_index + days] = np.arange(1, days + 1)
    return cells.reshape(-1, 7)


def create_calendar(start_index, days, month_name, day_names, year, era="",
                    color=False):
    """
    Render a month as a boxed text grid.

    Parameters
    ----------
    start_index : int
        Weekday of the first day of the month, 0 for Sunday.
    days : int
        Number of days in the month.
    month_name : str
    day_names : sequence of str
        Seven day names, starting with Sunday.
    year : int
    era : str
        Shown after the year in the header, e.g. "BE".
    color : bool
        Add ANSI color codes.

    Returns
    -------
    str
    """
    width = max([min_width] + [len(name) for name in day_names])
    cell = width + 2
    line_size = 7 * (cell + 1) + 1
    paint = _painter(color)

    title = f"{month_name} [{year} {era}]" if era else f"{month_name} [{year}]"
    bar = paint("border", "|")
    dashed = paint("border", "+" + "-" * (line_size - 2) + "+")
    blocked = paint("border", "+" + ("-" * cell + "+") * 7)
    header = bar + paint("title", title.center(line_size - 2)) + bar
    names = bar + bar.join(paint("days", f" {name:>{width}} ")
                           for name in day_names) + bar

    lines = [dashed, header, blocked, names, blocked]
    for week in month_grid(start_index, days):
        cells = [paint("dates", f" {d:>{width}} ") if d else " " * cell
                 for d in week]
        lines.append(bar + bar.join(cells) + bar)
        lines.append(blocked)
    return "\n".join(lines) + "\n"


def month_calendar(calendar, year, month, color=False):
    """
    Text calendar of a month in the named calendar.

    For the Bahai calendar year is the BE year (172 for 2015-2016).
    """
    check_calendar(calendar)
    validate_year(year, calendar)
    year = int(year)
    if calendar == "bahai":
        fields = get_major_cycle_year(year - 1)
    else:
        fields = (year,)
    jd = date_to_julian(calendar, *fields, month, 1)
    month = int(month)
    if calendar == "bahai":
        days = days_in_bahai_month_year(month, *fields)
    else:
        days = days_in_month[calendar](month, year)
    return create_calendar(day_of_week(jd), days, month_name(month, calendar),
                           constants.day_names[calendar], year,
                           constants.eras[calendar], color)
