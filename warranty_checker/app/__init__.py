"""
Application package initializer.

The project is split into ``core`` (configuration, logging, storage,
security, dispatch and assets), ``schemas``, ``services`` and the
versioned ``api`` routers.
"""

from .main import app  # noqa: F401
