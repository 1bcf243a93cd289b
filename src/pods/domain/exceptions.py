from typing import Optional, Sequence


class PodException(Exception):
    """Base exception for module registry errors."""


class InvalidDefinition(PodException):
    """Raised when a module definition is malformed.

    This occurs when:
    - The module id is missing, empty or not a string.
    - No factory (or constant export) was supplied.
    - The dependency list is not a list of module ids.

    Attributes:
        reason: Optional description of what was wrong.
    """

    def __init__(self, reason: Optional[str] = None) -> None:
        self.reason = reason
        message = "Invalid module definition"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UndefinedModule(PodException):
    """Raised when a required module id has no definition.

    Attributes:
        module_id: The id that could not be found.
    """

    def __init__(self, module_id: object) -> None:
        self.module_id = module_id
        super().__init__(f"Module {module_id!r} is undefined")


class CircularReference(PodException):
    """Raised when resolution re-enters a module already being resolved.

    Attributes:
        module_id: The module at which the cycle was detected.
        path: Active resolution path from the first occurrence of module_id back to it.
    """

    def __init__(self, module_id: str, path: Sequence[str] = ()) -> None:
        self.module_id = module_id
        self.path = list(path) or [module_id, module_id]
        super().__init__(f"Circular reference to {module_id!r}: {' -> '.join(self.path)}")


class ResolutionDepthExceeded(PodException):
    """Raised when the active resolution path grows beyond the configured limit.

    Attributes:
        module_id: The module whose resolution would exceed the limit.
        max_depth: The configured limit.
    """

    def __init__(self, module_id: str, max_depth: int) -> None:
        self.module_id = module_id
        self.max_depth = max_depth
        super().__init__(f"Resolving {module_id!r} exceeds the maximum resolution depth of {max_depth}")
