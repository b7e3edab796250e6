"""
Top‑level package for the User API.

This file makes ``user_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``user_api.app.main``.  All functionality lives in submodules under
``app``.
"""

__all__ = []
