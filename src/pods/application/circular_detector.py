"""Application layer - Circular reference detection."""

from typing import List, Optional

from pods.domain import CircularReference, ModuleEntry, ModuleState, ResolutionDepthExceeded


class CircularReferenceDetector:
    """Detects circular references during resolution.

    The build state of each entry marks whether it is on the active resolution
    path. The detector also keeps the ordered path of module ids so that a
    detected cycle can be reported in full.

    Attributes:
        _path: Ids of the modules currently being resolved, outermost first.
        _max_depth: Optional limit on the length of the path.
    """

    def __init__(self, max_depth: Optional[int] = None) -> None:
        """Initialize the detector with an empty resolution path.

        Args:
            max_depth: Maximum path length, or None for no limit.
        """
        self._path: List[str] = []
        self._max_depth = max_depth

    @property
    def path(self) -> List[str]:
        """Copy of the active resolution path."""
        return list(self._path)

    def enter(self, entry: ModuleEntry) -> None:
        """Mark an entry as resolving and push it onto the path.

        Args:
            entry: The entry about to be built.

        Raises:
            CircularReference: If the entry is already resolving.
            ResolutionDepthExceeded: If the path would grow beyond max_depth.

        Example:
            >>> detector.enter(a_entry)
            >>> detector.enter(b_entry)
            >>> detector.enter(a_entry)  # Raises CircularReference
        """
        module_id = entry.definition.module_id

        if entry.state == ModuleState.RESOLVING:
            if module_id in self._path:
                cycle = self._path[self._path.index(module_id) :] + [module_id]
            else:
                cycle = [module_id, module_id]
            raise CircularReference(module_id, cycle)

        if self._max_depth is not None and len(self._path) >= self._max_depth:
            raise ResolutionDepthExceeded(module_id, self._max_depth)

        entry.state = ModuleState.RESOLVING
        self._path.append(module_id)

    def leave(self, entry: ModuleEntry) -> None:
        """Pop an entry off the path.

        An entry that is still resolving did not get built, so it goes back to
        UNBUILT and may be retried by a later call.

        Args:
            entry: The entry whose resolution finished or failed.
        """
        if entry.state == ModuleState.RESOLVING:
            entry.state = ModuleState.UNBUILT
        if self._path and self._path[-1] == entry.definition.module_id:
            self._path.pop()

    def clear(self) -> None:
        """Clear the resolution path."""
        self._path.clear()
