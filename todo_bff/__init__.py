"""
Top‑level package for the Todo BFF service.

This file makes ``todo_bff`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``todo_bff.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
