"""
Application package initializer.

The project is split by concern: ``core`` holds configuration,
logging, errors and persistence; ``services`` holds the business
rules for mechanics, brands and task assignment; ``schemas`` holds
the request/response models and ``api`` exposes versioned routers.
"""

from .main import app  # noqa: F401
