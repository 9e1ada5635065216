"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The project is organised into layers: ``core`` holds
configuration, logging, the database connection and the error
taxonomy; ``validators`` holds the field rules; ``repositories``
wraps the SQL; ``services`` owns the business rules and ``api``
exposes them over HTTP under ``api/<version>/``.
"""

from .main import app  # noqa: F401
