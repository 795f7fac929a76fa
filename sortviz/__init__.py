"""Step-by-step visualisation and sonification of sorting algorithms."""

__version__ = "0.1.0"
__all__ = ["algorithms", "app", "audio", "config", "session"]