import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from pods.application.circular_detector import CircularReferenceDetector
from pods.application.resolver import ModuleResolver
from pods.domain import (
    MISSING,
    InvalidDefinition,
    IRegistry,
    IResolver,
    ModuleDefinition,
    ModuleEntry,
    ModuleState,
    PodConfig,
    UndefinedModule,
)

logger = logging.getLogger(__name__)


def _constant(value: Any) -> Callable[..., Any]:
    """Wrap a value in a factory that ignores its arguments and returns it."""

    def factory(*_: Any) -> Any:
        return value

    return factory


class Pod(IRegistry):
    """Module registry with lazy, memoized dependency resolution.

    A pod maps module ids to definitions. Modules are built on first
    ``require`` by resolving their dependencies depth-first and calling their
    factory with the results. Pods are isolated from one another: defining a
    module on one never makes it resolvable on another.

    The reserved token (``"pod"`` by default) and the pod's own name always
    resolve to the pod itself.

    Attributes:
        _name: Optional instance name, usable as a self-reference.
        _config: Pod configuration.
        _entries: Dictionary mapping module ids to their entries.
        _resolver: Component responsible for resolving ids.
        _lock: Reentrant lock held for each top-level operation.

    Example:
        >>> pod = Pod("app")
        >>> pod.declare("greeting", "Hello")
        >>> pod.define("greeter", ["greeting"], lambda greeting: lambda name: f"{greeting} {name}")
        >>> pod.require("greeter")("World")
        'Hello World'
    """

    def __init__(self, name: Optional[str] = None, config: Optional[PodConfig] = None) -> None:
        """Initialize an empty pod.

        Args:
            name: Optional instance name. Requiring it resolves to the pod itself.
            config: Optional configuration; defaults to ``PodConfig()``.
        """
        self._name = name or None
        self._config = config or PodConfig()
        self._entries: Dict[str, ModuleEntry] = {}
        self._resolver: IResolver = ModuleResolver(CircularReferenceDetector(self._config.max_depth))
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Pod(name={self._name!r}, modules={len(self._entries)})"

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def config(self) -> PodConfig:
        return self._config

    def define(self, module_id: Optional[str] = None, dependencies: Any = MISSING, factory: Any = MISSING) -> "Pod":
        """Define a module, replacing any prior definition under the same id.

        Accepted shapes:

        - ``define(id, factory)``
        - ``define(id, dependencies, factory)``
        - ``define(id, constant_value)``

        A factory that is not callable is treated as a constant export.

        Args:
            module_id: Identifier of the module.
            dependencies: Ordered list of dependency ids. When called with two
                positional arguments and this is not a list or tuple, it is the factory.
            factory: Callable invoked with the resolved dependencies, or a constant export.

        Returns:
            The pod, for chaining.

        Raises:
            InvalidDefinition: If the id is missing or no factory was supplied.

        Example:
            >>> pod.define("config", {"debug": True})
            >>> pod.define("app", ["config"], lambda config: App(config))
        """
        if factory is MISSING and not isinstance(dependencies, (list, tuple)):
            dependencies, factory = (), dependencies
        if dependencies is MISSING:
            dependencies = ()

        if module_id is None or module_id == "":
            raise InvalidDefinition("a module id is required")
        if factory is MISSING:
            raise InvalidDefinition(f"module {module_id!r} has no factory or exports")
        if not isinstance(dependencies, (list, tuple)):
            raise InvalidDefinition(f"dependencies of module {module_id!r} must be a list of module ids")

        if not callable(factory):
            factory = _constant(factory)

        self._store(module_id, dependencies, factory)
        return self

    def declare(self, module_id: Union[str, Mapping[str, Any]], value: Any = MISSING) -> "Pod":
        """Declare one or more modules whose exports are the given values.

        Values are never invoked, so callables can be declared as exports.

        Args:
            module_id: Identifier of the module, or a mapping of ids to export values.
            value: The export value when a single id is given.

        Returns:
            The pod, for chaining.

        Raises:
            InvalidDefinition: If a single id is given without a value.

        Example:
            >>> pod.declare({"name": "pods", "version": "0.1.0"})
            >>> pod.declare("formatter", str.upper)
        """
        if isinstance(module_id, Mapping):
            declarations = dict(module_id)
        else:
            if value is MISSING:
                raise InvalidDefinition(f"module {module_id!r} has no exports")
            declarations = {module_id: value}

        with self._lock:
            for declared_id, exports in declarations.items():
                self._store(declared_id, (), _constant(exports))
        return self

    def require(
        self,
        identifiers: Union[str, Sequence[str]],
        continuation: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Resolve one or more modules, building them and their dependencies as needed.

        Args:
            identifiers: A module id, or an ordered list of module ids.
            continuation: Optional callable invoked with the resolved modules as
                positional arguments, in request order.

        Returns:
            The resolved module for a single id, otherwise a list of resolved modules.

        Raises:
            UndefinedModule: If an id (or a transitive dependency) is not defined.
            CircularReference: If a module depends on itself, directly or indirectly.
            ResolutionDepthExceeded: If the dependency chain is deeper than configured.

        Example:
            >>> db = pod.require("db")
            >>> db, cache = pod.require(["db", "cache"])
            >>> pod.require(["db", "cache"], lambda db, cache: print(db, cache))
        """
        single = isinstance(identifiers, str)
        requested = [identifiers] if single else list(identifiers)

        with self._lock:
            resolved = self._resolver.resolve_all(requested, self)

        if callable(continuation):
            continuation(*resolved)

        return resolved[0] if single else resolved

    def is_self_reference(self, module_id: object) -> bool:
        """Check whether the id refers to this pod.

        Args:
            module_id: The id to check.

        Returns:
            True for the reserved token or the pod's own name.
        """
        if module_id == self._config.self_reference_token:
            return True
        return self._name is not None and module_id == self._name

    def get_entry(self, module_id: object) -> ModuleEntry:
        if not isinstance(module_id, str) or module_id not in self._entries:
            raise UndefinedModule(module_id)
        return self._entries[module_id]

    def state_of(self, module_id: str) -> ModuleState:
        """Get the build state of a defined module.

        Raises:
            UndefinedModule: If no module is defined under the id.
        """
        return self.get_entry(module_id).state

    def defined_ids(self) -> List[str]:
        """Get the defined module ids in definition order."""
        return list(self._entries)

    def __contains__(self, module_id: object) -> bool:
        return isinstance(module_id, str) and module_id in self._entries

    def _store(self, module_id: str, dependencies: Sequence[str], factory: Callable[..., Any]) -> None:
        """Validate a definition and store a fresh entry for it.

        Raises:
            InvalidDefinition: If the id or dependency ids are not non-empty strings.
        """
        try:
            definition = ModuleDefinition(
                module_id=module_id,
                dependencies=tuple(dependencies),
                factory=factory,
            )
        except ValidationError as e:
            raise InvalidDefinition(f"module {module_id!r} is malformed: {e}") from e

        with self._lock:
            self._entries[module_id] = ModuleEntry(definition=definition)

        logger.debug("Defined module %r with dependencies %s", module_id, list(definition.dependencies))
