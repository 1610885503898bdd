"""Data structures for a dog shelter and interpreter commands that exercise them."""

__version__ = "0.1.0"