"""Rendering engine for doc comments.

This module provides comment rendering with clean architecture:

- AsciidoctorRenderer: Rebuilds a symbol's comment from rendered pieces
- DocumentRenderer: Renders one piece of text in block or inline mode
- MarkupEngine: Protocol for the markup engine (asciidoctor subprocess, mocks)
- TemplateProvider: Protocol for output template preparation

For most use cases, get a renderer from Container.renderer(config).
"""

from adoclet.engine.backends import SubprocessAsciidoctorEngine, build_command
from adoclet.engine.container import Container
from adoclet.engine.options import (
    build_attributes,
    build_options,
    default_attributes,
    parse_attribute,
)
from adoclet.engine.protocols import (
    AttributeTable,
    AttributeValue,
    MarkupEngine,
    RenderMode,
    RenderOptions,
    TemplateDirectory,
    TemplateProvider,
)
from adoclet.engine.renderer import AsciidoctorRenderer, DocumentRenderer
from adoclet.engine.templates import OutputTemplates

__all__ = [
    # Core classes
    "AsciidoctorRenderer",
    "DocumentRenderer",
    "Container",
    # Protocols and models
    "MarkupEngine",
    "TemplateProvider",
    "RenderOptions",
    "RenderMode",
    "TemplateDirectory",
    "AttributeTable",
    "AttributeValue",
    # Implementations
    "SubprocessAsciidoctorEngine",
    "OutputTemplates",
    "build_command",
    # Configuration
    "default_attributes",
    "parse_attribute",
    "build_attributes",
    "build_options",
]
