"""Calendar arithmetic, date shifting, periods, vacation days and printable calendars."""

__version__ = "0.1.0"