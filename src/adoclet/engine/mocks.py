"""Mock implementations for testing the engine layer.

Provides in-memory implementations of engine protocols that can be
used in tests without subprocess or filesystem side effects.
"""

from pathlib import Path
from typing import Any

from adoclet.engine.protocols import (
    ErrorSink,
    MarkupEngine,
    RenderMode,
    RenderOptions,
    TemplateDirectory,
    TemplateProvider,
)


class MockEngine:
    """Mock markup engine for testing.

    Records all calls and wraps the text so tests can see which mode each
    call was rendered in: `<p>text</p>` for block, `<span>text</span>` for
    inline. Set `error` to make every call raise it.
    """

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def render(
        self,
        text: str,
        options: RenderOptions,
        timeout: float | None = None,
    ) -> str:
        """Record the call and return the wrapped text."""
        self.calls.append({
            "text": text,
            "options": options,
            "mode": options.mode,
            "timeout": timeout,
        })
        if self.error is not None:
            raise self.error
        if options.mode == RenderMode.INLINE:
            return f"<span>{text}</span>"
        return f"<p>{text}</p>"

    @property
    def modes(self) -> list[RenderMode]:
        return [call["mode"] for call in self.calls]

    def reset(self) -> None:
        """Clear all recorded calls."""
        self.calls.clear()


class MockTemplateProvider:
    """Mock template provider for testing.

    Hands out a fixed path without touching the filesystem. With `fail`
    set, reports an error to the sink and returns an absent result.
    """

    def __init__(self, path: Path = Path("/tmp/adoclet-mock-templates"), fail: bool = False) -> None:
        self.path = path
        self.fail = fail
        self.created: list[TemplateDirectory] = []
        self.deleted: list[TemplateDirectory] = []

    def create(self, error_sink: ErrorSink) -> TemplateDirectory:
        """Record creation and return the configured result."""
        if self.fail:
            error_sink("Failed to prepare output templates: mock failure")
            return TemplateDirectory.absent()
        templates = TemplateDirectory(path=self.path)
        self.created.append(templates)
        return templates

    def delete(self, templates: TemplateDirectory) -> None:
        """Record deletion."""
        self.deleted.append(templates)


# Verify protocol compliance at import time
assert isinstance(MockEngine(), MarkupEngine)
assert isinstance(MockTemplateProvider(), TemplateProvider)
