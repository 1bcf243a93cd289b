from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from pods.domain.models import MISSING, ModuleEntry, PodConfig


class IRegistry(ABC):
    """Abstract interface for module registry operations."""

    @property
    @abstractmethod
    def name(self) -> Optional[str]:
        """Instance name of the registry, if it has one."""

    @property
    @abstractmethod
    def config(self) -> PodConfig:
        """Configuration of the registry."""

    @abstractmethod
    def define(self, module_id: Optional[str] = None, dependencies: Any = MISSING, factory: Any = MISSING) -> "IRegistry":
        """Register a module definition.

        Args:
            module_id: Identifier of the module.
            dependencies: Ordered dependency ids, or the factory when given two arguments.
            factory: Callable building the module, or a constant export.
        """

    @abstractmethod
    def declare(self, module_id: Union[str, Mapping[str, Any]], value: Any = MISSING) -> "IRegistry":
        """Register one or more constant exports.

        Args:
            module_id: Identifier of the module, or a mapping of ids to values.
            value: The export value when a single id is given.
        """

    @abstractmethod
    def require(self, identifiers: Union[str, Sequence[str]], continuation: Optional[Callable[..., Any]] = None) -> Any:
        """Resolve one or more modules by id.

        Args:
            identifiers: A module id or an ordered sequence of ids.
            continuation: Optional callable receiving the resolved modules positionally.
        """

    @abstractmethod
    def is_self_reference(self, module_id: object) -> bool:
        """Check whether the id refers to the registry itself."""

    @abstractmethod
    def get_entry(self, module_id: object) -> ModuleEntry:
        """Get the entry registered for an id.

        Raises:
            UndefinedModule: If no module is defined under the id.
        """


class IResolver(ABC):
    """Abstract interface for dependency resolution operations."""

    @abstractmethod
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
        """
