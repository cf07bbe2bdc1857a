"""datespin: bounded, steppable date-time model with a text adapter."""

__version__ = "0.1.0"
