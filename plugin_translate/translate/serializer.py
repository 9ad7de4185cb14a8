"""Renders OpenCode command and agent markdown files."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_AGENT_MODE = "subagent"

DEFAULT_AGENT_TOOLS: dict[str, bool] = {
    "read": True,
    "glob": True,
    "grep": True,
    "bash": True,
    "write": False,
    "edit": False,
}


def render_command(description: str, body: str) -> str:
    """Command file: a description-only header, blank line, body, newline."""
    return f"---\ndescription: {description}\n---\n\n{body}\n"


def render_agent(
    description: str,
    model: str,
    body: str,
    *,
    mode: str = DEFAULT_AGENT_MODE,
    tools: Mapping[str, bool] = DEFAULT_AGENT_TOOLS,
) -> str:
    """Agent file with fixed header order: description, mode, model, tools."""
    lines = [
        "---",
        f"description: {description}",
        f"mode: {mode}",
        f"model: {model}",
        "tools:",
    ]
    lines.extend(f"  {name}: {_yaml_bool(allowed)}" for name, allowed in tools.items())
    lines.extend(["---", "", body, ""])
    return "\n".join(lines)


def _yaml_bool(value: bool) -> str:
    return "true" if value else "false"
