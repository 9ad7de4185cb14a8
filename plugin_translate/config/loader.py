"""YAML config loading for plugin-translate."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TranslateConfig

CONFIG_FILENAME = "plugin-translate.yaml"


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest precedence first."""
    paths = [Path(CONFIG_FILENAME), Path.home() / ".plugin-translate" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> TranslateConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    Empty files fall through to the next candidate.
    """
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            return TranslateConfig.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return TranslateConfig()


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


# Default YAML template for `plugin-translate config init`
DEFAULT_CONFIG_TEMPLATE = """\
# plugin-translate.yaml

# Source plugin layout (relative to the plugin root)
source:
  commands_dir: "commands"
  agents_dir: "agents"
  extension: ".md"

# Generated OpenCode layout (relative to the plugin root)
output:
  base_dir: ".opencode"
  commands_dir: "commands"
  agents_dir: "agents"

# Command file naming: <root_command>.md stays as-is, others get the prefix
naming:
  root_command: "pm"
  command_prefix: "pm-"

# Command references rewritten in document bodies, applied in order
refs:
  prefixes: ["/pm:", "/design:", "/backlog:"]
  replacement: "/pm-"

# Agent model aliases
models:
  aliases:
    sonnet: "anthropic/claude-sonnet"
    haiku: "anthropic/claude-haiku"
    opus: "anthropic/claude-opus"
  default_alias: "sonnet"
  fallback: "anthropic/claude-sonnet"   # unknown aliases map here

# Generated agent frontmatter
agent:
  mode: "subagent"
  tools:
    read: true
    glob: true
    grep: true
    bash: true
    write: false
    edit: false

# Logging
log_level: "info"              # debug | info | warn | error
"""
