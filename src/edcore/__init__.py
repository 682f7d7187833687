"""Line-oriented text buffer engine for ed-style editors."""

__all__ = [
    "buffer",
    "config",
    "expressions",
    "patterns",
    "runtime",
    "ui",
]

__version__ = "0.1.0"
