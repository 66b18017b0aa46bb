"""Markup engine implementations.

Concrete implementation of the MarkupEngine protocol.
"""

import logging
import subprocess

from adoclet.exceptions import EngineNotFoundError, RenderError, RenderTimeoutError
from adoclet.engine.protocols import MarkupEngine, RenderMode, RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "asciidoctor"


def build_command(options: RenderOptions, executable: str = DEFAULT_EXECUTABLE) -> list[str]:
    """Build the asciidoctor command line for `options`.

    Output always goes to stdout without header and footer, so both modes
    yield an embeddable fragment. Inline mode additionally selects the
    inline doctype, which drops the enclosing paragraph.

    Returns:
        Argument list ending with `-` (read source from stdin)
    """
    cmd = [
        executable,
        "-o", "-",
        "-s",
        "-b", options.backend,
        "-S", options.safe,
        "-E", options.template_engine,
    ]
    if options.base_dir is not None:
        cmd.extend(["-B", str(options.base_dir)])
    if options.template_dir is not None:
        cmd.extend(["-T", str(options.template_dir)])
    if options.mode == RenderMode.INLINE:
        cmd.extend(["-d", "inline"])

    for name, value in options.attributes.items():
        if value is True:
            cmd.extend(["-a", name])
        elif value is False:
            cmd.extend(["-a", f"{name}!"])
        else:
            cmd.extend(["-a", f"{name}={value}"])

    cmd.append("-")
    return cmd


class SubprocessAsciidoctorEngine(MarkupEngine):
    """Render AsciiDoc by running the asciidoctor executable.

    Each call is a blocking subprocess bounded by `timeout`.
    """

    def __init__(self, executable: str = DEFAULT_EXECUTABLE) -> None:
        self.executable = executable

    def render(
        self,
        text: str,
        options: RenderOptions,
        timeout: float | None = None,
    ) -> str:
        """Render `text` via asciidoctor and return the converted output."""
        cmd = build_command(options, self.executable)

        try:
            result = subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=timeout,
            )
        except FileNotFoundError as e:
            raise EngineNotFoundError(self.executable) from e
        except subprocess.TimeoutExpired as e:
            raise RenderTimeoutError(timeout if timeout is not None else 0.0) from e

        if result.returncode != 0:
            raise RenderError(
                f"asciidoctor failed with exit code {result.returncode}",
                stderr=result.stderr,
            )

        if result.stderr:
            logger.warning("asciidoctor: %s", result.stderr.strip())

        # The CLI terminates its output with a newline the fragment must not carry.
        output = result.stdout
        if output.endswith("\n"):
            output = output[:-1]
        return output
