"""Output template preparation.

The bundled ERB templates adapt asciidoctor's HTML to what javadoc pages
expect (no wrapper divs, shifted heading levels). They are copied into a
temporary directory for the engine to load, and removed when the run ends.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from adoclet.exceptions import TemplateResourceError
from adoclet.engine.protocols import ErrorSink, TemplateDirectory, TemplateProvider

logger = logging.getLogger(__name__)

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

TEMPLATE_NAMES = (
    "listing.html.erb",
    "paragraph.html.erb",
    "section.html.erb",
)


def log_error_sink(message: str) -> None:
    """Default error sink: report through the module logger."""
    logger.error("%s", message)


class OutputTemplates(TemplateProvider):
    """Copies the bundled templates into a temporary directory."""

    def __init__(self, source_dir: Path = TEMPLATES_DIR) -> None:
        self.source_dir = source_dir

    def create(self, error_sink: ErrorSink = log_error_sink) -> TemplateDirectory:
        """Prepare the template directory.

        Returns:
            A present TemplateDirectory, or an absent one if any template
            could not be copied (the error goes to `error_sink`)
        """
        template_dir: Path | None = None
        try:
            template_dir = Path(tempfile.mkdtemp(prefix="adoclet-templates-"))
            for name in TEMPLATE_NAMES:
                shutil.copyfile(self.source_dir / name, template_dir / name)
        except OSError as e:
            error = TemplateResourceError(f"Failed to prepare output templates: {e}")
            error_sink(error.message)
            if template_dir is not None:
                shutil.rmtree(template_dir, ignore_errors=True)
            return TemplateDirectory.absent()

        logger.debug("Output templates prepared in %s", template_dir)
        return TemplateDirectory(path=template_dir)

    def delete(self, templates: TemplateDirectory) -> None:
        """Remove a prepared template directory. Absent results are ignored."""
        if templates.path is None or not templates.path.exists():
            return
        shutil.rmtree(templates.path)
        logger.debug("Output templates removed from %s", templates.path)
