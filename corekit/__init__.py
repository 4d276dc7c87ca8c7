"""Small helpers: value hashing, list and mapping utilities, set operations, streams and a wait group."""

__version__ = "0.1.0"