"""
Application layer - Use cases and orchestration.

This layer contains the registry and the resolution algorithm.
It depends only on the Domain layer.
"""

from .circular_detector import CircularReferenceDetector
from .registry import Pod
from .resolver import ModuleResolver

__all__ = [
    "Pod",
    "ModuleResolver",
    "CircularReferenceDetector",
]
