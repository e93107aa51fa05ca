"""Readable implementations of classic introductory algorithms and data structures."""

__version__ = "0.1.0"

__all__ = ["arrays", "cli", "numbers", "search", "strings", "structures"]