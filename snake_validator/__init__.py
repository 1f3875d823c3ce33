"""Server-authoritative move validator for a grid snake game."""

__version__ = "1.0.0"
