"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, database, logging, security),
``repositories`` (SQL access), ``services`` (business rules),
``schemas`` (request and response models) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
