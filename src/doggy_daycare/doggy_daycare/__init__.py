"""Doggy Daycare scheduling package.

This package is organized by feature modules (dogs, schedules, attendance,
settings) on top of a single JSON document store, with a thin Flask
controller layer and plain service classes.
"""
