"""Doclet configuration schema and loading."""

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from adoclet.exceptions import ConfigFileError

CONFIG_FILENAME = "adoclet.yaml"

# :name: value / :name: / :name!: / :!name:
_ATTRIBUTE_ENTRY = re.compile(r"^:(!?)([A-Za-z0-9_][\w-]*)(!?):(?:[ \t]+(.*?))?[ \t]*$")


class DocletConfig(BaseModel):
    """Complete doclet configuration.

    Loaded from adoclet.yaml under 'adoclet:' section.
    CLI flags override config values with precedence:
    1. CLI flags (highest)
    2. adoclet.yaml
    3. Defaults (lowest)
    """

    base_dir: Path | None = Field(
        default=None, description="Base directory for include directives"
    )
    attributes: list[str] = Field(
        default_factory=list, description="Attribute overrides (name or name=value)"
    )
    attributes_file: Path | None = Field(
        default=None, description="AsciiDoc file whose attribute entries are loaded"
    )
    timeout_seconds: float | None = Field(
        default=60.0, description="Time limit for each engine call"
    )
    templates: bool = Field(default=True, description="Use the bundled output templates")
    executable: str = Field(default="asciidoctor", description="asciidoctor executable")

    def attribute_tokens(self) -> list[str]:
        """Return override tokens: attributes file entries first, then `attributes`."""
        tokens: list[str] = []
        if self.attributes_file is not None:
            tokens.extend(load_attributes_file(self.attributes_file))
        tokens.extend(self.attributes)
        return tokens


def parse_attribute_entries(content: str) -> list[str]:
    """Extract attribute entries from AsciiDoc source as override tokens.

    Example:
        parse_attribute_entries(":project: adoclet\\n:icons!:")
        # ["project=adoclet", "icons!"]
    """
    tokens = []
    for line in content.splitlines():
        match = _ATTRIBUTE_ENTRY.match(line)
        if not match:
            continue
        leading_bang, name, trailing_bang, value = match.groups()
        if leading_bang or trailing_bang:
            tokens.append(f"{name}!")
        elif value:
            tokens.append(f"{name}={value}")
        else:
            tokens.append(name)
    return tokens


def load_attributes_file(path: Path) -> list[str]:
    """Load attribute entries from an AsciiDoc attributes file.

    Raises:
        ConfigFileError: If the file cannot be read
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(str(path), f"cannot read attributes file: {e}") from e
    return parse_attribute_entries(content)


def load_doclet_config(project_root: Path | None = None) -> DocletConfig:
    """Load doclet configuration from adoclet.yaml.

    Args:
        project_root: Directory containing adoclet.yaml. Defaults to cwd.

    Returns:
        DocletConfig with values from file or defaults

    Raises:
        ConfigFileError: If the file is not valid YAML or fails validation
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_FILENAME

    # Return defaults if no config file
    if not config_path.exists():
        return DocletConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigFileError(str(config_path), f"invalid YAML: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigFileError(str(config_path), "expected a mapping")

    section = raw_config.get("adoclet") or {}

    try:
        config = DocletConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigFileError(str(config_path), str(e)) from e

    # Relative paths in the file are relative to the file itself
    updates = {}
    if config.base_dir is not None and not config.base_dir.is_absolute():
        updates["base_dir"] = project_root / config.base_dir
    if config.attributes_file is not None and not config.attributes_file.is_absolute():
        updates["attributes_file"] = project_root / config.attributes_file
    if updates:
        config = config.model_copy(update=updates)
    return config


def merge_cli_overrides(
    config: DocletConfig,
    base_dir: Path | None = None,
    attributes: list[str] | None = None,
    attributes_file: Path | None = None,
    timeout_seconds: float | None = None,
    templates: bool | None = None,
) -> DocletConfig:
    """Merge CLI flag overrides into config.

    CLI attributes are appended after the file's, so they win on conflicts.

    Returns:
        New DocletConfig with overrides applied

    Example:
        config = load_doclet_config()
        config = merge_cli_overrides(config, attributes=["toc"])
    """
    # Create a copy to avoid mutating original
    updated = config.model_copy(deep=True)

    if base_dir is not None:
        updated.base_dir = base_dir

    if attributes:
        updated.attributes = [*updated.attributes, *attributes]

    if attributes_file is not None:
        updated.attributes_file = attributes_file

    if timeout_seconds is not None:
        updated.timeout_seconds = timeout_seconds

    if templates is not None:
        updated.templates = templates

    return updated
