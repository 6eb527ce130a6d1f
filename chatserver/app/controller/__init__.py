"""
The `controller` package is the only entry point to the persistence layer.
"""
from chatserver.app.controller.controller import Controller, create_controller

__all__ = ["Controller", "create_controller"]
