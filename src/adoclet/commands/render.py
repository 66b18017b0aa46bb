"""Render command implementation."""

import json
import logging
from pathlib import Path

from adoclet.config import load_doclet_config, merge_cli_overrides
from adoclet.display import (
    console,
    print_error,
    print_info,
    print_rendered_comments,
    print_success,
    print_warning,
)
from adoclet.doclet.driver import RenderedComment, render_file
from adoclet.engine.container import Container
from adoclet.exceptions import ConfigurationError, OutputFileError, RenderError, SourceFileError

logger = logging.getLogger(__name__)


def _write_results(output: Path, results: list[RenderedComment]) -> None:
    try:
        output.write_text(json.dumps([r.model_dump() for r in results], indent=2))
    except OSError as e:
        raise OutputFileError(str(output), e.strerror or str(e)) from e


def render_command(
    path: Path,
    project_root: Path | None,
    attributes: list[str] | None,
    base_dir: Path | None,
    attributes_file: Path | None,
    timeout_seconds: float | None,
    templates: bool | None,
    output: Path | None,
    keep_going: bool,
) -> None:
    """Render every doc comment of a source file.

    This function contains the business logic for the render command.
    """
    try:
        config = load_doclet_config(project_root)
        config = merge_cli_overrides(
            config,
            base_dir=base_dir,
            attributes=attributes,
            attributes_file=attributes_file,
            timeout_seconds=timeout_seconds,
            templates=templates,
        )
    except ConfigurationError as e:
        print_error(e.message)
        raise SystemExit(1) from e

    print_info(f"Rendering doc comments in {path}")
    console.print()

    try:
        with Container.renderer(config, error_sink=print_warning) as renderer:
            results = render_file(path, renderer, fail_fast=not keep_going)
    except ConfigurationError as e:
        print_error(e.message)
        raise SystemExit(1) from e
    except RenderError as e:
        print_error(e.message)
        raise SystemExit(1) from e
    except SourceFileError as e:
        print_error(e.message)
        raise SystemExit(1) from e

    failures = [r for r in results if not r.ok]

    if output is not None:
        try:
            _write_results(output, results)
        except OutputFileError as e:
            print_error(e.message)
            raise SystemExit(1) from e
        print_success(f"Wrote {len(results)} rendered comments to {output}")
    else:
        print_rendered_comments(results)

    if failures:
        print_error(f"{len(failures)} of {len(results)} comments failed to render")
        raise SystemExit(1)

    logger.debug("Rendered %d comments", len(results))
