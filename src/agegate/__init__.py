"""agegate — staged age validation with typed, recoverable failures."""

__version__ = "0.1.0"
