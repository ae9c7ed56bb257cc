"""
Core utilities package.

Logging setup shared by applications embedding the formatting helpers.
"""

from .logger import setup_logger

__all__ = ['setup_logger']
