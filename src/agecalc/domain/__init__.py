"""Domain layer — calendar math, field rules, and form lifecycle.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
