"""printf-style formatting with fixed padding rules, and C-style character, string and memory helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "conversions", "memory", "printf", "spec", "strings"]