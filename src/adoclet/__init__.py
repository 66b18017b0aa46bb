"""adoclet - AsciiDoc doc comments rendered to HTML.

Renders documentation comments written in AsciiDoc before they are handed
back to the documentation driver.
"""

from adoclet.exceptions import (
    AdocletError,
    ConfigFileError,
    ConfigurationError,
    EngineNotFoundError,
    InvalidAttributeError,
    OutputFileError,
    RenderError,
    RenderTimeoutError,
    SourceFileError,
    TemplateResourceError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "AdocletError",
    # Configuration
    "ConfigurationError",
    "ConfigFileError",
    "InvalidAttributeError",
    # Rendering
    "RenderError",
    "RenderTimeoutError",
    "EngineNotFoundError",
    # Resources
    "SourceFileError",
    "OutputFileError",
    "TemplateResourceError",
]
