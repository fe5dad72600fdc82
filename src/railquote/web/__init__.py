"""FastAPI REST API for railing quotes.

This module provides a REST API for quoting railings, validating
configurations, rendering diagrams and exporting to various formats.

Usage:
    uvicorn railquote.web:app --reload
"""

from railquote.web.app import app, create_app

__all__ = ["app", "create_app"]
