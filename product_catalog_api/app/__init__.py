"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, exceptions, seed data),
``schemas`` (request and response models, query specifications),
``services`` (the product store and the query pipeline) and ``api``
(the HTTP routes).
"""

from .main import app  # noqa: F401
