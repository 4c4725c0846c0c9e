#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 19:31:50 2025

Errors raised by the date validators and the name lookups.
"""


class InvalidDate(ValueError):
    """
    A date field that is missing, not a number or out of range.

    The offending value is kept in the value attribute.
    """
    field = "date"

    def __init__(self, value, message=None):
        self.value = value
        if message is None:
            shown = "" if value is None else value
            message = f"Invalid {self.field} [{shown}]."
        ValueError.__init__(self, message)


class InvalidYear(InvalidDate):
    field = "year"


class InvalidMonth(InvalidDate):
    field = "month"


class InvalidDay(InvalidDate):
    field = "day"
