"""
pods: Tiny module registry with lazy, memoized dependency resolution.

Public API exports for the pods package. Importing the package constructs
the process-wide default pod; ``define``, ``declare`` and ``require`` operate on it.
"""

from typing import Any, Callable, Mapping, Optional, Sequence, Union

# Application exports
from pods.application.registry import Pod

# Domain exports
from pods.domain.enums import ModuleState
from pods.domain.exceptions import (
    CircularReference,
    InvalidDefinition,
    PodException,
    ResolutionDepthExceeded,
    UndefinedModule,
)
from pods.domain.models import MISSING, PodConfig

__version__ = "0.1.0"

default_pod = Pod()


def define(module_id: Optional[str] = None, dependencies: Any = MISSING, factory: Any = MISSING) -> Pod:
    """Define a module on the default pod. See ``Pod.define``."""
    return default_pod.define(module_id, dependencies, factory)


def declare(module_id: Union[str, Mapping[str, Any]], value: Any = MISSING) -> Pod:
    """Declare constant modules on the default pod. See ``Pod.declare``."""
    return default_pod.declare(module_id, value)


def require(identifiers: Union[str, Sequence[str]], continuation: Optional[Callable[..., Any]] = None) -> Any:
    """Resolve modules from the default pod. See ``Pod.require``."""
    return default_pod.require(identifiers, continuation)


__all__ = [
    # Registry
    "Pod",
    "PodConfig",
    "default_pod",
    "define",
    "declare",
    "require",
    # Enums
    "ModuleState",
    # Exceptions
    "PodException",
    "InvalidDefinition",
    "UndefinedModule",
    "CircularReference",
    "ResolutionDepthExceeded",
]
