"""
Top‑level package for the Song Library API.

This file makes ``song_library_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``song_library_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
