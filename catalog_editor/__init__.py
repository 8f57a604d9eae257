"""Single-page product catalog editor."""

__version__ = "1.0.0"
