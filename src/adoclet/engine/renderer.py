"""Documentation renderer with dependency injection.

DocumentRenderer runs one piece of comment text through the sanitizer and
the markup engine. AsciidoctorRenderer rebuilds a symbol's whole comment
(description plus block tags) from rendered pieces.
"""

import logging

from adoclet.config import DocletConfig
from adoclet.doclet.comments import split_comment
from adoclet.engine.options import build_options
from adoclet.engine.protocols import (
    ErrorSink,
    MarkupEngine,
    RenderMode,
    RenderOptions,
    TemplateDirectory,
    TemplateProvider,
)
from adoclet.engine.templates import log_error_sink
from adoclet.models import DocumentationBlock, Tag
from adoclet.text.escape import escape_tag_like_tokens
from adoclet.text.sanitize import sanitize

logger = logging.getLogger(__name__)


class DocumentRenderer:
    """Renders sanitized text with an injected markup engine.

    The shared options are never modified. Each call hands the engine a
    snapshot carrying that call's mode, so calls from several threads
    cannot change each other's mode.
    """

    def __init__(
        self,
        engine: MarkupEngine,
        options: RenderOptions,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize renderer with dependencies.

        Args:
            engine: Markup engine used for every call
            options: Options shared by every call
            timeout_seconds: Time limit for each engine call (None for no limit)
        """
        self._engine = engine
        self._options = options
        self._timeout = timeout_seconds

    @property
    def options(self) -> RenderOptions:
        return self._options

    def render(self, text: str, inline: bool, options: RenderOptions | None = None) -> str:
        """Render one piece of comment text.

        Args:
            text: AsciiDoc source as returned by the host parser
            inline: Produce a fragment embeddable mid-line instead of a
                block-level body
            options: Options to use instead of the shared ones

        Returns:
            Engine output, verbatim

        Raises:
            RenderError: If the engine fails or times out
        """
        base = options if options is not None else self._options
        mode = RenderMode.INLINE if inline else RenderMode.BLOCK
        source = sanitize(text)
        logger.debug("Rendering %d chars in %s mode", len(source), mode.value)
        return self._engine.render(source, base.with_mode(mode), timeout=self._timeout)


class AsciidoctorRenderer:
    """Doclet renderer using and configuring Asciidoctor.

    Owns the optional template directory for the length of a run. Use it as
    a context manager, or call `cleanup()`, to release the directory.

    Example:
        with Container.renderer(config) as renderer:
            html = renderer.render_doc(block)
    """

    def __init__(
        self,
        document_renderer: DocumentRenderer,
        templates: TemplateDirectory | None = None,
        template_provider: TemplateProvider | None = None,
    ) -> None:
        self._document = document_renderer
        self._templates = templates if templates is not None else TemplateDirectory.absent()
        self._template_provider = template_provider

    @classmethod
    def from_config(
        cls,
        config: DocletConfig,
        engine: MarkupEngine,
        template_provider: TemplateProvider | None = None,
        error_sink: ErrorSink = log_error_sink,
    ) -> "AsciidoctorRenderer":
        """Prepare templates and options for a documentation run.

        Template failures are reported to `error_sink` and the run goes on
        with the engine's own templates.

        Raises:
            ConfigurationError: If attribute overrides are malformed
        """
        templates = TemplateDirectory.absent()
        if config.templates and template_provider is not None:
            templates = template_provider.create(error_sink)
        if not templates.is_present:
            logger.debug("Rendering without custom output templates")

        try:
            options = build_options(
                base_dir=config.base_dir,
                template_dir=templates.path,
                attribute_overrides=config.attribute_tokens(),
            )
        except Exception:
            if templates.is_present and template_provider is not None:
                template_provider.delete(templates)
            raise

        document_renderer = DocumentRenderer(engine, options, config.timeout_seconds)
        return cls(document_renderer, templates, template_provider)

    @property
    def options(self) -> RenderOptions:
        return self._document.options

    @property
    def templates(self) -> TemplateDirectory:
        return self._templates

    def render(self, text: str, inline: bool) -> str:
        """Render one piece of comment text with the shared options."""
        return self._document.render(text, inline)

    def render_doc(self, block: DocumentationBlock) -> str:
        """Render a generic document (class, field, method, etc).

        The description is rendered as a block, each tag inline after its
        name, one per line, in their original order.

        Args:
            block: Description and tags supplied by the driver

        Returns:
            Buffer to substitute for the symbol's comment source
        """
        # hide text that looks like tags (such as annotations in source code)
        description = escape_tag_like_tokens(block.description)

        buffer = [self._document.render(description, inline=False), "\n"]
        for tag in block.tags:
            self._render_tag(tag, buffer)
            buffer.append("\n")
        return "".join(buffer)

    def render_comment(self, raw: str) -> str:
        """Render a raw comment body, tags included.

        Escaping runs on the whole raw text before it is split into
        description and tags, so an annotation at the start of a line is
        not mistaken for a tag.
        """
        block = split_comment(escape_tag_like_tokens(raw))
        return self.render_doc(block)

    def _render_tag(self, tag: Tag, buffer: list[str]) -> None:
        buffer.append(tag.name)
        buffer.append(" ")
        buffer.append(self._document.render(tag.text, inline=True))

    def cleanup(self) -> None:
        """Release the template directory. Safe to call more than once."""
        if self._templates.is_present and self._template_provider is not None:
            self._template_provider.delete(self._templates)
        self._templates = TemplateDirectory.absent()

    def __enter__(self) -> "AsciidoctorRenderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()
