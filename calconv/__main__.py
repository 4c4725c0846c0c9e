#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 18 20:02:33 2025

Command line interface.

    python -m calconv convert gregorian persian 2015 4 16
    python -m calconv calendar bahai 172 1 --color
    python -m calconv weekday hijri 1436 6 26
"""

import sys
import argparse
from calconv.constants import CALENDARS
from calconv.convert import convert, date_to_julian
from calconv.names import day_name, month_name
from calconv.printer import month_calendar


def format_date(calendar, date):
    fields = "-".join(str(field) for field in date)
    return f"{fields} ({month_name(date[-2], calendar)})"


def parser():
    p = argparse.ArgumentParser(prog="calconv",
                                description="Convert dates between calendars.")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("convert", help="convert a date")
    c.add_argument("source", choices=CALENDARS)
    c.add_argument("target", choices=CALENDARS)
    c.add_argument("fields", nargs="+",
                   help="year month day (major cycle year month day for bahai)")

    m = sub.add_parser("calendar", help="print a month")
    m.add_argument("calendar", choices=CALENDARS)
    m.add_argument("year", help="year (BE year for bahai)")
    m.add_argument("month")
    m.add_argument("--color", action="store_true", help="ANSI colors")

    w = sub.add_parser("weekday", help="day of the week of a date")
    w.add_argument("calendar", choices=CALENDARS)
    w.add_argument("fields", nargs="+")
    return p


def main(argv=None):
    args = parser().parse_args(argv)
    try:
        if args.command == "convert":
            date = convert(args.source, args.target, *args.fields)
            print(format_date(args.target, date))
        elif args.command == "calendar":
            print(month_calendar(args.calendar, args.year, args.month,
                                 args.color), end="")
        else:
            jd = date_to_julian(args.calendar, *args.fields)
            print(day_name(jd, args.calendar))
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
