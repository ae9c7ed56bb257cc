"""
Utility functions package.

Exposes helpers for numeric/byte formatting and record diffing.
"""

from .formatters import format_floats, format_number, to_bytes, format_bytes
from .diff import diff

__all__ = ['format_floats', 'format_number', 'to_bytes', 'format_bytes', 'diff']
