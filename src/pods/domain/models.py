from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from pods.domain.enums import ModuleState

DEFAULT_SELF_REFERENCE_TOKEN = "pod"


class _Missing:
    """Marker for an argument that was not supplied at all."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ModuleDefinition(BaseModel):
    """Value object describing how to build a module.

    Attributes:
        module_id: Identifier the module is registered under.
        dependencies: Ordered module ids passed positionally to the factory.
        factory: Callable invoked once with the resolved dependencies.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    module_id: StrictStr = Field(..., min_length=1, description="Identifier of the module.")
    dependencies: Tuple[StrictStr, ...] = Field(
        default=(),
        description="Ordered ids of the modules injected into the factory.",
    )
    factory: Callable[..., Any] = Field(..., description="Callable that builds the module export.")


class ModuleEntry(BaseModel):
    """Registry-owned record tracking the build state of a definition.

    Attributes:
        definition: The definition this entry builds.
        state: Current build state.
        export: Memoized factory result, meaningful once state is BUILT.
        build_count: Number of times the factory has been invoked.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    definition: ModuleDefinition = Field(..., description="The definition this entry builds.")
    state: ModuleState = Field(default=ModuleState.UNBUILT, description="Current build state.")
    export: Any = Field(default=None, description="Memoized export of the module.")
    build_count: int = Field(default=0, description="Number of factory invocations.")

    @property
    def is_built(self) -> bool:
        return self.state == ModuleState.BUILT

    def mark_built(self, export: Any) -> None:
        """Memoize the factory result.

        Args:
            export: Value returned by the factory.
        """
        self.export = export
        self.state = ModuleState.BUILT
        self.build_count += 1


class PodConfig(BaseModel):
    """Configuration for a Pod.

    Attributes:
        self_reference_token: Reserved id that always resolves to the pod itself.
        max_depth: Maximum length of the active resolution path, or None for no limit.
    """

    model_config = ConfigDict(frozen=True)

    self_reference_token: StrictStr = Field(
        default=DEFAULT_SELF_REFERENCE_TOKEN,
        min_length=1,
        description="Reserved id resolving to the pod itself.",
    )
    max_depth: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum length of the active resolution path.",
    )
