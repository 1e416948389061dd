from . import health, people

__all__ = [
    "health",
    "people",
]
