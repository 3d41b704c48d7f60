"""Lottie import helpers, touch gestures, scene discovery and sample downloads."""

__version__ = "0.6.0"

__all__ = [
    "catalog",
    "cli",
    "fetch",
    "gradient",
    "keyframes",
    "scenes",
    "touch",
]