"""Section navigation engine for line-oriented text buffers."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "motions",
    "runtime",
    "schemes",
    "session",
]

__version__ = "0.1.0"
