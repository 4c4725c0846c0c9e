#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 19:02:41 2025

Epochs and name tables for the supported calendars.
"""

# Julian day numbers of day 1 of each calendar (at midnight)
GREGORIAN_EPOCH = 1721425.5    # 1-1-1 (proleptic Gregorian)
BAHAI_EPOCH     = 2394646.5    # 1844-3-21
PERSIAN_EPOCH   = 1948320.5    # 622-3-19
HIJRI_EPOCH     = 1948439.5    # 622-7-16

BAHAI_START_YEAR = 1844        # Gregorian year of BAHAI_EPOCH
SAKA_START       = 80          # day of the Gregorian year before Chaitra 1
SAKA_OFFSET      = 78          # Gregorian year - Saka year

# Leap years in the 30 year cycle of the tabular Islamic calendar
HIJRI_LEAP_YEARS = frozenset((2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29))

CALENDARS = ("gregorian", "bahai", "persian", "hijri", "saka")

mdays   = {1:31, 2:28, 3:31, 4:30, 5:31, 6:30, 7:31, 8:31, 9:30, 10:31,
           11:30, 12:31}

gregorian_months = ("January", "February", "March", "April", "May", "June",
                    "July", "August", "September", "October", "November",
                    "December")

bahai_months = ("Baha", "Jalal", "Jamal", "'Azamat", "Nur", "Rahmat",
                "Kalimat", "Kamal", "Asma'", "'Izzat", "Mashiyyat", "'Ilm",
                "Qudrat", "Qawl", "Masa'il", "Sharaf", "Sultan", "Mulk",
                "'Ala")
AYYAM_I_HA = "Ayyam-i-Ha"      # intercalary days, month 20

persian_months = ("Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad",
                  "Shahrivar", "Mehr", "Aban", "Azar", "Dey", "Bahman",
                  "Esfand")

hijri_months = ("Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani",
                "Jumada al-Ula", "Jumada al-Akhira", "Rajab", "Sha'ban",
                "Ramadan", "Shawwal", "Dhu al-Qa'da", "Dhu al-Hijja")

saka_months = ("Chaitra", "Vaisakha", "Jyaistha", "Asadha", "Sravana",
               "Bhadra", "Asvina", "Kartika", "Agrahayana", "Pausa",
               "Magha", "Phalguna")

# Day names, Sunday first (index = weekday number)
gregorian_days = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday",
                  "Friday", "Saturday")
bahai_days     = ("Jamal", "Kamal", "Fidal", "'Idal", "Istijlal",
                  "Istiqlal", "Jalal")
persian_days   = ("Yekshanbeh", "Doshanbeh", "Seshanbeh", "Chaharshanbeh",
                  "Panjshanbeh", "Jomeh", "Shanbeh")
hijri_days     = ("al-Ahad", "al-Ithnayn", "ath-Thulatha", "al-Arbia",
                  "al-Khamis", "al-Jumuah", "as-Sabt")
saka_days      = ("Ravivara", "Somavara", "Mangalavara", "Budhavara",
                  "Brahaspativara", "Sukravara", "Sanivara")

month_names = {"gregorian": gregorian_months,
               "bahai":     bahai_months + (AYYAM_I_HA,),
               "persian":   persian_months,
               "hijri":     hijri_months,
               "saka":      saka_months}

day_names = {"gregorian": gregorian_days,
             "bahai":     bahai_days,
             "persian":   persian_days,
             "hijri":     hijri_days,
             "saka":      saka_days}

# Era suffixes used in calendar headers
eras = {"gregorian": "CE", "bahai": "BE", "persian": "AP", "hijri": "AH",
        "saka": "Saka"}

# ANSI SGR foreground codes
ansi_colors = {"black": 30, "red": 31, "green": 32, "yellow": 33, "blue": 34,
               "magenta": 35, "cyan": 36, "white": 37}
ANSI_RESET = "\033[0m"
