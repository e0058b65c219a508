"""Flag value types, short-option splitting, typo suggestions, and help and completion helpers."""

__version__ = "0.1.0"