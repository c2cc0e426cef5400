"""Utility constants for reltime.

Sub-month units are expressed in seconds, calendar units in months.
Builders normalize every magnitude with these factors.
"""

# Linear time units (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Calendar units (all values in months)
MONTH = 1
YEAR = 12
