"""Composition root for engine dependency injection.

Centralizes the creation and wiring of engine components.
This is the single place where concrete implementations are bound to protocols.

Usage:
    # Default usage (production)
    with Container.renderer(config) as renderer:
        renderer.render_doc(block)

    # Testing with mocks
    Container.set_engine(MockEngine())
    Container.set_template_provider(MockTemplateProvider())
    renderer = Container.renderer(config)

    # Reset to defaults
    Container.reset()
"""

from adoclet.config import DocletConfig
from adoclet.engine.backends import SubprocessAsciidoctorEngine
from adoclet.engine.protocols import ErrorSink, MarkupEngine, TemplateProvider
from adoclet.engine.renderer import AsciidoctorRenderer
from adoclet.engine.templates import OutputTemplates, log_error_sink


class Container:
    """Service container for engine dependencies.

    Provides lazy initialization of default implementations and
    allows overriding for testing purposes.
    """

    _engine: MarkupEngine | None = None
    _template_provider: TemplateProvider | None = None

    @classmethod
    def engine(cls, executable: str = "asciidoctor") -> MarkupEngine:
        """Get the markup engine.

        Returns a SubprocessAsciidoctorEngine by default. An overridden
        engine is returned as is, whatever the executable.
        """
        if cls._engine is not None:
            return cls._engine
        return SubprocessAsciidoctorEngine(executable)

    @classmethod
    def template_provider(cls) -> TemplateProvider:
        """Get the template provider.

        Returns OutputTemplates by default.
        """
        if cls._template_provider is None:
            cls._template_provider = OutputTemplates()
        return cls._template_provider

    @classmethod
    def renderer(
        cls,
        config: DocletConfig | None = None,
        error_sink: ErrorSink = log_error_sink,
    ) -> AsciidoctorRenderer:
        """Create an AsciidoctorRenderer with current dependencies.

        This is the main factory method for a documentation run.
        """
        if config is None:
            config = DocletConfig()
        return AsciidoctorRenderer.from_config(
            config,
            engine=cls.engine(config.executable),
            template_provider=cls.template_provider(),
            error_sink=error_sink,
        )

    @classmethod
    def set_engine(cls, engine: MarkupEngine | None) -> None:
        """Override the markup engine.

        Pass None to reset to default on next access.
        """
        cls._engine = engine

    @classmethod
    def set_template_provider(cls, provider: TemplateProvider | None) -> None:
        """Override the template provider.

        Pass None to reset to default on next access.
        """
        cls._template_provider = provider

    @classmethod
    def reset(cls) -> None:
        """Reset all overrides to defaults.

        Call this in test teardown to ensure clean state.
        """
        cls._engine = None
        cls._template_provider = None
