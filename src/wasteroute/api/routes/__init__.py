"""Route group exports."""

from . import cleaners, health, routes

__all__ = ["routes", "health", "cleaners"]
