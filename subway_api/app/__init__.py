"""
Application package initializer.

The project is split into small layers: ``core`` (configuration,
logging, storage and domain errors), ``repositories`` (SQL access),
``services`` (business rules), ``schemas`` (request and response
shapes) and ``api`` (HTTP routes).  Each resource (lines, stations)
exposes a router defined in ``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
