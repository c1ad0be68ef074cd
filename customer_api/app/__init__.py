"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage and error
mapping), ``schemas`` (request/response models), ``services``
(storage access offloaded from the event loop) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
