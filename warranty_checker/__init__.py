"""
Top-level package for the Warranty Checker service.

All functionality lives in submodules under ``app``.
"""

__all__ = []
