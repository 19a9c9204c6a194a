"""agecalc — birth-date form with calendar-aware age calculation."""

__version__ = "0.1.0"
