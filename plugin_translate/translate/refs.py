"""Rewrites namespaced slash-command references (/pm:init) to flat ones (/pm-init)."""

from __future__ import annotations

from collections.abc import Sequence

from plugin_translate.config.models import RefsConfig

from .pipeline import Transform, TransformPipeline

DEFAULT_PREFIXES: tuple[str, ...] = ("/pm:", "/design:", "/backlog:")
DEFAULT_REPLACEMENT = "/pm-"


def translate_command_refs(
    text: str,
    prefixes: Sequence[str] = DEFAULT_PREFIXES,
    replacement: str = DEFAULT_REPLACEMENT,
) -> str:
    # Sequential, so a later prefix sees the output of earlier replacements
    for prefix in prefixes:
        text = text.replace(prefix, replacement)
    return text


class CommandRefRewriter(Transform):
    def __init__(
        self,
        prefixes: Sequence[str] = DEFAULT_PREFIXES,
        replacement: str = DEFAULT_REPLACEMENT,
    ):
        self.prefixes = tuple(prefixes)
        self.replacement = replacement

    @classmethod
    def from_config(cls, refs: RefsConfig) -> CommandRefRewriter:
        return cls(refs.prefixes, refs.replacement)

    def apply(self, body: str) -> str:
        return translate_command_refs(body, self.prefixes, self.replacement)


def default_pipeline(refs: RefsConfig | None = None) -> TransformPipeline:
    """Body pipeline used when the translator is not given one."""
    return TransformPipeline([CommandRefRewriter.from_config(refs or RefsConfig())])
