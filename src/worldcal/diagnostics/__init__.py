"""Diagnostics package.

Light-weight command line checks over the registered calendars.
year_table --plot needs the optional plotting extra (matplotlib).
"""

__all__ = ["pretty_month", "year_table", "round_trip"]
