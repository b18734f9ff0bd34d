"""Decode, store and export activity data recorded by fitness watches."""

__version__ = "0.1.0"

__all__ = [
    "activitykind",
    "models",
    "battery",
    "database",
    "summary",
    "detailparser",
    "notifications",
]