"""Infrastructure layer — wall clock, refresh timer, preference storage.

This layer depends on stdlib only, plus the domain value types it
produces (``CalendarDate`` for clock readings).
It must never import from services, commands, or output.
"""
