"""Maps Claude model aliases to OpenCode provider/model identifiers."""

from __future__ import annotations

from collections.abc import Mapping

MODEL_ALIASES: dict[str, str] = {
    "sonnet": "anthropic/claude-sonnet",
    "haiku": "anthropic/claude-haiku",
    "opus": "anthropic/claude-opus",
}

FALLBACK_MODEL = "anthropic/claude-sonnet"


def map_model(
    alias: str | None,
    mapping: Mapping[str, str] | None = None,
    fallback: str | None = None,
) -> str:
    """Return the target identifier for ``alias``.

    Never raises: unknown, empty or missing aliases resolve to the fallback.
    """
    table = MODEL_ALIASES if mapping is None else mapping
    default = FALLBACK_MODEL if fallback is None else fallback
    if not alias:
        return default
    return table.get(alias, default)
