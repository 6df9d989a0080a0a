"""Mini README: HTTP interface package.

Provides the FastAPI application factory used by the ``serve`` command and
by tests.
"""

from .web_app import create_application

__all__ = ["create_application"]
