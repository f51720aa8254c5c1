"""Structural pattern matching over parsed JSON values, with object rest views and a demo."""

__version__ = "0.1.0"
__all__ = ["exclude", "patterns", "demo"]