# -*- coding: utf-8 -*-
"""
Datas em formato legível, como mostradas nas listagens e nos CSVs.
"""

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def format_date(value):
    """Ex.: 'January 1, 2099 at 10:00 AM'."""
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year} at {hour:02d}:{value.minute:02d} {period}"


def format_date_short(value):
    """Ex.: 'Jan 1, 2099'."""
    return f"{_MONTHS[value.month - 1][:3]} {value.day}, {value.year}"
