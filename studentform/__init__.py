"""Student entry form model with plain UTF-8 text record storage."""

__version__ = "0.1.0"
__all__ = ["form", "record"]