import logging
from typing import Any, List, Optional, Sequence

from pods.application.circular_detector import CircularReferenceDetector
from pods.domain import IRegistry, IResolver

logger = logging.getLogger(__name__)


class ModuleResolver(IResolver):
    """Resolves module ids depth-first with memoized construction.

    Each module's dependencies are resolved recursively before its factory is
    called with them positionally. A factory runs at most once per entry;
    later requests reuse the memoized export.

    Attributes:
        _detector: Tracks the active resolution path for cycle detection.
    """

    def __init__(self, detector: Optional[CircularReferenceDetector] = None) -> None:
        self._detector = detector or CircularReferenceDetector()

    @property
    def detector(self) -> CircularReferenceDetector:
        return self._detector

    def resolve_all(self, identifiers: Sequence[str], registry: IRegistry) -> List[Any]:
        """Resolve each id in order against the registry.

        Args:
            identifiers: Ordered module ids.
            registry: Registry holding the definitions.

        Returns:
            Resolved modules in the same order.

        Raises:
            UndefinedModule: If an id (or a transitive dependency) is not defined.
            CircularReference: If an id is re-entered during its own resolution.
            ResolutionDepthExceeded: If the dependency chain is deeper than allowed.

        Example:
            >>> pod.define("a", lambda: 1).define("b", ["a"], lambda a: a + 1)
            >>> resolver.resolve_all(["b", "a"], pod)
            [2, 1]
        """
        return [self.resolve_one(module_id, registry) for module_id in identifiers]

    def resolve_one(self, module_id: str, registry: IRegistry) -> Any:
        """Resolve a single module id, building it if needed."""
        # Self-reference takes priority over any definition under the same id
        if registry.is_self_reference(module_id):
            return registry

        entry = registry.get_entry(module_id)
        if entry.is_built:
            return entry.export

        self._detector.enter(entry)
        try:
            arguments = self.resolve_all(entry.definition.dependencies, registry)
            logger.debug("Building module %r", module_id)
            entry.mark_built(entry.definition.factory(*arguments))
        finally:
            self._detector.leave(entry)

        return entry.export
