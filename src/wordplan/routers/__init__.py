"""Router package exports."""

from . import config, curve, health, plan

__all__ = [
    "config",
    "curve",
    "health",
    "plan",
]
