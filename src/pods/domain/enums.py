from enum import Enum


class ModuleState(str, Enum):
    """Build state of a registered module.

    Attributes:
        UNBUILT: Factory has not run (or its last run failed).
        RESOLVING: Module is on the active resolution path.
        BUILT: Factory has run and its export is memoized.
    """

    UNBUILT = "unbuilt"
    RESOLVING = "resolving"
    BUILT = "built"

    def __str__(self) -> str:
        return self.value
