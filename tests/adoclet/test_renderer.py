"""Tests for document rendering and comment reconstruction."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from adoclet.config import DocletConfig
from adoclet.engine import (
    AsciidoctorRenderer,
    Container,
    DocumentRenderer,
    RenderMode,
    TemplateDirectory,
    build_options,
)
from adoclet.engine.mocks import MockEngine, MockTemplateProvider
from adoclet.exceptions import InvalidAttributeError, RenderError
from adoclet.models import DocumentationBlock, Tag


@pytest.fixture
def document_renderer(mock_engine: MockEngine) -> DocumentRenderer:
    return DocumentRenderer(mock_engine, build_options(), timeout_seconds=12.0)


class TestDocumentRenderer:
    """Tests for DocumentRenderer."""

    def test_block_mode(self, document_renderer: DocumentRenderer, mock_engine: MockEngine) -> None:
        assert document_renderer.render("Hello", inline=False) == "<p>Hello</p>"
        assert mock_engine.modes == [RenderMode.BLOCK]

    def test_inline_mode(self, document_renderer: DocumentRenderer, mock_engine: MockEngine) -> None:
        assert document_renderer.render("Hello", inline=True) == "<span>Hello</span>"
        assert mock_engine.modes == [RenderMode.INLINE]

    def test_text_is_sanitized(self, document_renderer: DocumentRenderer, mock_engine: MockEngine) -> None:
        document_renderer.render("  a\n b {at}c{slash}d  ", inline=False)
        assert mock_engine.calls[0]["text"] == "a\nb &#64;c/d"

    def test_timeout_passed(self, document_renderer: DocumentRenderer, mock_engine: MockEngine) -> None:
        document_renderer.render("x", inline=True)
        assert mock_engine.calls[0]["timeout"] == 12.0

    def test_explicit_options(self, document_renderer: DocumentRenderer, mock_engine: MockEngine) -> None:
        custom = build_options(attribute_overrides=["toc"])
        document_renderer.render("x", inline=False, options=custom)
        assert mock_engine.calls[0]["options"].attributes["toc"] is True

    def test_shared_options_never_change(self, document_renderer: DocumentRenderer) -> None:
        shared = document_renderer.options

        document_renderer.render("A", inline=False)
        document_renderer.render("B", inline=True)

        assert document_renderer.options is shared
        assert shared.mode == RenderMode.BLOCK

    def test_mode_of_one_call_does_not_affect_another(
        self, document_renderer: DocumentRenderer, mock_engine: MockEngine
    ) -> None:
        texts = [f"{'inline' if i % 2 else 'block'}-{i}" for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            outputs = list(
                pool.map(lambda text: document_renderer.render(text, text.startswith("inline")), texts)
            )

        assert len(mock_engine.calls) == len(texts)
        for call in mock_engine.calls:
            expected = RenderMode.INLINE if call["text"].startswith("inline") else RenderMode.BLOCK
            assert call["mode"] == expected
        for text, output in zip(texts, outputs):
            tag = "span" if text.startswith("inline") else "p"
            assert output == f"<{tag}>{text}</{tag}>"
        assert document_renderer.options.mode == RenderMode.BLOCK

    def test_engine_errors_propagate(self) -> None:
        renderer = DocumentRenderer(MockEngine(error=RenderError("boom")), build_options())
        with pytest.raises(RenderError, match="boom"):
            renderer.render("x", inline=False)


class TestRenderDoc:
    """Tests for AsciidoctorRenderer.render_doc."""

    def test_end_to_end(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        block = DocumentationBlock(
            description="Does {at}something.",
            tags=[Tag(name="author", text="Jane")],
        )

        assert renderer.render_doc(block) == (
            "<p>Does &#64;something.</p>\n"
            "author <span>Jane</span>\n"
        )

    def test_description_only(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        assert renderer.render_doc(DocumentationBlock(description="Text")) == "<p>Text</p>\n"

    def test_tag_order_preserved(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        block = DocumentationBlock(
            description="Desc",
            tags=[Tag(name="param", text="x"), Tag(name="return", text="y")],
        )

        lines = renderer.render_doc(block).split("\n")

        assert lines == ["<p>Desc</p>", "param <span>x</span>", "return <span>y</span>", ""]
        assert mock_engine.modes == [RenderMode.BLOCK, RenderMode.INLINE, RenderMode.INLINE]

    def test_annotation_survives(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        block = DocumentationBlock(description="Mark it @Override, not @param.")

        assert renderer.render_doc(block) == "<p>Mark it @Override, not @param.</p>\n"

    def test_render_errors_propagate(self) -> None:
        engine = MockEngine(error=RenderError("bad markup"))
        renderer = AsciidoctorRenderer(DocumentRenderer(engine, build_options()))

        with pytest.raises(RenderError, match="bad markup"):
            renderer.render_doc(DocumentationBlock(description="x"))


class TestRenderComment:
    """Tests for AsciidoctorRenderer.render_comment."""

    def test_splits_and_renders(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        raw = " Adds two numbers.\n\n @param a first\n  operand\n @return the sum"

        assert renderer.render_comment(raw) == (
            "<p>Adds two numbers.</p>\n"
            "@param <span>a first\n operand</span>\n"
            "@return <span>the sum</span>\n"
        )

    def test_annotation_at_line_start_is_not_a_tag(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        raw = " Usage:\n @Override\n @param x value"

        assert renderer.render_comment(raw) == (
            "<p>Usage:\n@Override</p>\n"
            "@param <span>x value</span>\n"
        )


class TestLifecycle:
    """Tests for renderer creation and cleanup."""

    def test_from_config_uses_templates(self, mock_engine: MockEngine) -> None:
        provider = MockTemplateProvider(path=Path("/tmp/tpl"))
        renderer = AsciidoctorRenderer.from_config(DocletConfig(), mock_engine, provider)

        assert renderer.templates.path == Path("/tmp/tpl")
        assert renderer.options.template_dir == Path("/tmp/tpl")

    def test_from_config_without_templates(self, mock_engine: MockEngine) -> None:
        provider = MockTemplateProvider()
        renderer = AsciidoctorRenderer.from_config(
            DocletConfig(templates=False), mock_engine, provider
        )

        assert provider.created == []
        assert renderer.options.template_dir is None

    def test_template_failure_is_not_fatal(self, mock_engine: MockEngine) -> None:
        errors: list[str] = []
        provider = MockTemplateProvider(fail=True)

        renderer = AsciidoctorRenderer.from_config(
            DocletConfig(), mock_engine, provider, error_sink=errors.append
        )

        assert len(errors) == 1
        assert renderer.templates.is_present is False
        assert renderer.options.template_dir is None
        assert renderer.render_doc(DocumentationBlock(description="x")) == "<p>x</p>\n"

    def test_from_config_applies_attributes(self, mock_engine: MockEngine) -> None:
        config = DocletConfig(base_dir=Path("/src"), attributes=["toc", "project=demo"])
        renderer = AsciidoctorRenderer.from_config(config, mock_engine)

        assert renderer.options.base_dir == Path("/src")
        assert renderer.options.attributes["toc"] is True
        assert renderer.options.attributes["project"] == "demo"

    def test_bad_attribute_releases_templates(self, mock_engine: MockEngine) -> None:
        provider = MockTemplateProvider()

        with pytest.raises(InvalidAttributeError):
            AsciidoctorRenderer.from_config(DocletConfig(attributes=["=x"]), mock_engine, provider)

        assert provider.deleted == provider.created

    def test_cleanup_is_idempotent(self, mock_engine: MockEngine) -> None:
        provider = MockTemplateProvider()
        renderer = AsciidoctorRenderer.from_config(DocletConfig(), mock_engine, provider)

        renderer.cleanup()
        renderer.cleanup()

        assert len(provider.deleted) == 1
        assert renderer.templates.is_present is False

    def test_cleanup_without_templates(self, mock_engine: MockEngine) -> None:
        renderer = AsciidoctorRenderer(DocumentRenderer(mock_engine, build_options()))
        renderer.cleanup()
        assert renderer.templates == TemplateDirectory.absent()

    def test_context_manager_releases_on_error(self, mock_engine: MockEngine) -> None:
        provider = MockTemplateProvider()
        mock_engine.error = RenderError("boom")

        with pytest.raises(RenderError):
            with AsciidoctorRenderer.from_config(DocletConfig(), mock_engine, provider) as renderer:
                renderer.render_doc(DocumentationBlock(description="x"))

        assert len(provider.deleted) == 1

    def test_container_renderer(
        self, mock_engine: MockEngine, mock_templates: MockTemplateProvider
    ) -> None:
        with Container.renderer(DocletConfig(timeout_seconds=3.0)) as renderer:
            renderer.render("x", inline=True)

        assert mock_engine.calls[0]["timeout"] == 3.0
        assert len(mock_templates.created) == 1
        assert len(mock_templates.deleted) == 1
