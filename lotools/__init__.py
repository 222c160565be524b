"""Helpers for fixed-size tuples, zipping, unzipping, cross joins and coalescing empty values."""

__version__ = "0.1.0"
__all__ = ["types", "type_manipulation", "tuples", "unzip", "crossjoin"]