"""
Top‑level package for the Autoservice API.

Marks ``autoservice_api`` as a package so that modules under ``app``
can be imported with fully qualified names such as
``autoservice_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
