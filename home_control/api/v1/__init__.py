"""
API v1 Package
===============

Version 1 API controllers.
"""
from .device_controller import router as device_router
from .control_controller import router as control_router
from .usage_controller import router as usage_router

__all__ = ["device_router", "control_router", "usage_router"]
