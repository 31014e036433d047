"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and the JSON record store in ``core``,
request/response models in ``schemas``, domain logic in ``services``
and HTTP routes in ``api``.
"""

from .main import app  # noqa: F401
