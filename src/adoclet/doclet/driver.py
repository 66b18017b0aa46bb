"""Reference documentation driver.

Walks the doc comments of a source file and substitutes each one with its
rendered buffer. A rendering error either stops the run (the default) or is
recorded on the comment and the next one is rendered.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from adoclet.doclet.comments import DocComment, extract_doc_comments
from adoclet.engine.renderer import AsciidoctorRenderer
from adoclet.exceptions import RenderError, SourceFileError

logger = logging.getLogger(__name__)


class RenderedComment(BaseModel):
    """Outcome of rendering one doc comment."""

    model_config = ConfigDict(frozen=True)

    line: int
    symbol: str
    html: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_comments(
    comments: list[DocComment],
    renderer: AsciidoctorRenderer,
    fail_fast: bool = True,
) -> list[RenderedComment]:
    """Render each comment, in order.

    Args:
        comments: Comments as extracted from a source file
        renderer: Renderer configured for the run
        fail_fast: Re-raise the first rendering error instead of recording it

    Returns:
        One RenderedComment per input comment
    """
    results = []
    for comment in comments:
        try:
            html = renderer.render_comment(comment.raw)
        except RenderError as e:
            if fail_fast:
                raise
            logger.error("Line %d (%s): %s", comment.line, comment.symbol, e.message)
            results.append(
                RenderedComment(line=comment.line, symbol=comment.symbol, error=e.message)
            )
            continue
        results.append(RenderedComment(line=comment.line, symbol=comment.symbol, html=html))
    return results


def render_source(
    source: str,
    renderer: AsciidoctorRenderer,
    fail_fast: bool = True,
) -> list[RenderedComment]:
    """Extract and render every doc comment of `source`."""
    comments = extract_doc_comments(source)
    logger.debug("Found %d doc comments", len(comments))
    return render_comments(comments, renderer, fail_fast=fail_fast)


def render_file(
    path: Path,
    renderer: AsciidoctorRenderer,
    fail_fast: bool = True,
) -> list[RenderedComment]:
    """Extract and render every doc comment of the file at `path`.

    Raises:
        SourceFileError: If the file cannot be read or is not valid UTF-8
    """
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceFileError(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise SourceFileError(str(path), e.strerror or str(e)) from e
    return render_source(source, renderer, fail_fast=fail_fast)
