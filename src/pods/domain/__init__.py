"""
Domain layer - Core models and rules.

This layer contains the module definitions, build states and errors.
It has no dependencies on other layers.
"""

from .enums import ModuleState
from .exceptions import (
    CircularReference,
    InvalidDefinition,
    PodException,
    ResolutionDepthExceeded,
    UndefinedModule,
)
from .interfaces import IRegistry, IResolver
from .models import DEFAULT_SELF_REFERENCE_TOKEN, MISSING, ModuleDefinition, ModuleEntry, PodConfig

__all__ = [
    # Enums
    "ModuleState",
    # Exceptions
    "PodException",
    "InvalidDefinition",
    "UndefinedModule",
    "CircularReference",
    "ResolutionDepthExceeded",
    # Interfaces
    "IRegistry",
    "IResolver",
    # Models
    "DEFAULT_SELF_REFERENCE_TOKEN",
    "MISSING",
    "ModuleDefinition",
    "ModuleEntry",
    "PodConfig",
]
