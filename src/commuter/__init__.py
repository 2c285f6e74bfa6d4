"""Commute durations between saved and ad-hoc locations."""

__version__ = "0.1.0"
