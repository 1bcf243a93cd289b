"""
FastAPI integration module.

Provides helpers for exposing pod modules as FastAPI dependencies.
"""

from .integration import PodMiddleware, create_fastapi_dependency, create_request_dependency

__all__ = [
    "create_fastapi_dependency",
    "create_request_dependency",
    "PodMiddleware",
]
