"""Protocols for the markup rendering engine.

Defines contracts for the external markup engine and the output template
provider, enabling dependency injection and testability.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# str is a value, True a flag with no value, False an unset attribute (name!)
AttributeValue = Union[str, bool]
AttributeTable = dict[str, AttributeValue]

ErrorSink = Callable[[str], None]


class RenderMode(str, Enum):
    """How the engine wraps its output."""

    BLOCK = "block"
    INLINE = "inline"


class RenderOptions(BaseModel):
    """Options passed to the markup engine on every render call.

    Frozen because a single instance is shared by every render call of a
    run. The render mode is never changed in place: `with_mode` returns a
    snapshot for one call. The attribute table is stored as a read-only
    copy, so snapshots can share it.
    """

    model_config = ConfigDict(frozen=True)

    safe: Literal["safe"] = "safe"
    backend: Literal["html5"] = "html5"
    template_engine: Literal["erubis"] = "erubis"
    base_dir: Path | None = None
    template_dir: Path | None = None
    attributes: Mapping[str, AttributeValue] = Field(default_factory=dict, validate_default=True)
    mode: RenderMode = RenderMode.BLOCK

    @field_validator("attributes", mode="after")
    @classmethod
    def _freeze_attributes(cls, value: Mapping[str, AttributeValue]) -> Mapping[str, AttributeValue]:
        return MappingProxyType(dict(value))

    @field_serializer("attributes")
    def _serialize_attributes(self, value: Mapping[str, AttributeValue]) -> AttributeTable:
        return dict(value)

    def with_mode(self, mode: RenderMode) -> "RenderOptions":
        """Return a copy of these options using `mode`."""
        if mode == self.mode:
            return self
        return self.model_copy(update={"mode": mode})


class TemplateDirectory(BaseModel):
    """Result of preparing output templates.

    Either present (holding the directory) or absent, in which case the
    engine falls back to its built-in templates.
    """

    model_config = ConfigDict(frozen=True)

    path: Path | None = None

    @classmethod
    def absent(cls) -> "TemplateDirectory":
        return cls()

    @property
    def is_present(self) -> bool:
        return self.path is not None


@runtime_checkable
class MarkupEngine(Protocol):
    """Protocol for markup rendering engines.

    Implementations turn AsciiDoc source into HTML.
    Examples: SubprocessAsciidoctorEngine, MockEngine
    """

    def render(
        self,
        text: str,
        options: RenderOptions,
        timeout: float | None = None,
    ) -> str:
        """Render `text` and return the engine output verbatim."""
        ...


@runtime_checkable
class TemplateProvider(Protocol):
    """Protocol for output template preparation.

    Failures during `create` are reported to the error sink, never raised.
    """

    def create(self, error_sink: ErrorSink) -> TemplateDirectory:
        """Prepare a template directory for the engine."""
        ...

    def delete(self, templates: TemplateDirectory) -> None:
        """Release a directory returned by `create`."""
        ...
