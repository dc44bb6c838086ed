"""Attendance Recap package.

This package is organized by feature modules (workdays, attendance, leaves,
duty, recap, tukin, ...) with a thin Flask controller layer over pure
classification code and read-only repository adapters.
"""
