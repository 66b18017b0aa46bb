"""adoclet exception hierarchy.

Provides a unified exception hierarchy for the rendering pipeline and CLI.
This enables:
- User-friendly error messages in the CLI
- Programmatic error handling by documentation drivers
- Clear distinction between fatal configuration errors and per-symbol
  rendering errors

Usage:
    from adoclet.exceptions import ConfigurationError, RenderError

    try:
        renderer.render_doc(block)
    except RenderError as e:
        print(f"Rendering failed: {e.message}")
    except AdocletError as e:
        print(f"adoclet error: {e}")
"""


class AdocletError(Exception):
    """Base exception for all adoclet errors.

    All adoclet-specific exceptions inherit from this class, allowing
    callers to catch all adoclet errors with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(AdocletError):
    """Error in adoclet configuration.

    Detected at startup and fatal to the whole documentation run.
    """

    pass


class InvalidAttributeError(ConfigurationError):
    """Malformed attribute override token.

    Raised when a `key` or `key=value` token has an empty key.
    """

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid attribute '{token}': {reason}")


class ConfigFileError(ConfigurationError):
    """Invalid configuration or attributes file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config in {path}: {reason}")


# Rendering Errors


class RenderError(AdocletError):
    """The markup engine rejected or failed on a piece of text.

    Raised per render call and never recovered locally.
    """

    def __init__(self, message: str, stderr: str = "") -> None:
        self.stderr = stderr
        if stderr:
            message += f": {stderr.strip()[:500]}"
        super().__init__(message)


class RenderTimeoutError(RenderError):
    """The markup engine exceeded its time limit."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Rendering timed out after {timeout_seconds}s")


class EngineNotFoundError(RenderError):
    """The markup engine executable could not be started."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"Markup engine not found: {executable}. Is asciidoctor installed?"
        )


# Resource Errors


class SourceFileError(AdocletError):
    """A source file could not be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read source file {path}: {reason}")


class OutputFileError(AdocletError):
    """Rendered output could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output file {path}: {reason}")


class TemplateResourceError(AdocletError):
    """Output templates could not be prepared.

    Never raised out of the pipeline: reported to the error sink and the
    run continues without custom templates.
    """

    pass
