"""PluginTranslator — generates OpenCode commands and agents from Claude Code plugin sources."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from plugin_translate.config.models import TranslateConfig
from plugin_translate.translate.frontmatter import extract_body, extract_frontmatter
from plugin_translate.translate.model_map import map_model
from plugin_translate.translate.models import (
    Converted,
    DocumentKind,
    Skipped,
    TranslateReport,
    TranslationResult,
)
from plugin_translate.translate.pipeline import TransformPipeline
from plugin_translate.translate.refs import default_pipeline
from plugin_translate.translate.serializer import render_agent, render_command

logger = logging.getLogger(__name__)


class PluginTranslator:
    def __init__(
        self,
        root: str | Path,
        config: TranslateConfig | None = None,
        pipeline: TransformPipeline | None = None,
    ):
        """
        Args:
            root: Plugin root holding the commands/ and agents/ source directories
            config: TranslateConfig with layout, naming and mapping settings
            pipeline: Body transforms; defaults to command reference rewriting
        """
        self.root = Path(root)
        self.config = config or TranslateConfig()
        self.pipeline = pipeline if pipeline is not None else default_pipeline(self.config.refs)

    # -- Layout --------------------------------------------------------------

    @property
    def commands_source(self) -> Path:
        return self.root / self.config.source.commands_dir

    @property
    def agents_source(self) -> Path:
        return self.root / self.config.source.agents_dir

    @property
    def output_dir(self) -> Path:
        return self.root / self.config.output.base_dir

    @property
    def commands_dest(self) -> Path:
        return self.output_dir / self.config.output.commands_dir

    @property
    def agents_dest(self) -> Path:
        return self.output_dir / self.config.output.agents_dir

    # -- Public API ----------------------------------------------------------

    def translate(self, *, dry_run: bool = False) -> TranslateReport:
        """One-shot run over both source directories.

        Missing descriptions are skipped and reported; I/O errors propagate.
        """
        start = time.monotonic()
        report = TranslateReport(dry_run=dry_run)

        command_files = self._document_files(self.commands_source)
        agent_files = self._document_files(self.agents_source)

        if not dry_run:
            self.commands_dest.mkdir(parents=True, exist_ok=True)
            self.agents_dest.mkdir(parents=True, exist_ok=True)

        for path in command_files:
            report.record(self.translate_command(path, dry_run=dry_run))

        for path in agent_files:
            report.record(self.translate_agent(path, dry_run=dry_run))

        report.duration = time.monotonic() - start
        logger.info("Done! Commands: %d, Agents: %d", report.commands, report.agents)
        return report

    def translate_command(self, path: Path, *, dry_run: bool = False) -> TranslationResult:
        name = self._logical_name(path)
        content = self._read(path)
        fm = extract_frontmatter(content)

        description = fm.get("description")
        if not description:
            logger.warning("Skipping command %s (no description)", name)
            return Skipped(
                kind=DocumentKind.COMMAND, name=name, source=str(path), reason="no description"
            )

        out_name = self.command_output_name(name)
        body = self.pipeline.apply(extract_body(content))
        dest = self.commands_dest / out_name
        self._write(dest, render_command(description, body), dry_run=dry_run)

        logger.info("Command: %s -> %s", name, out_name)
        return Converted(kind=DocumentKind.COMMAND, name=name, source=str(path), destination=str(dest))

    def translate_agent(self, path: Path, *, dry_run: bool = False) -> TranslationResult:
        name = self._logical_name(path)
        content = self._read(path)
        fm = extract_frontmatter(content)

        description = fm.get("description")
        if not description:
            logger.warning("Skipping agent %s (no description)", name)
            return Skipped(
                kind=DocumentKind.AGENT, name=name, source=str(path), reason="no description"
            )

        models = self.config.models
        model = map_model(fm.get("model") or models.default_alias, models.aliases, models.fallback)
        body = self.pipeline.apply(extract_body(content))
        output = render_agent(
            description,
            model,
            body,
            mode=self.config.agent.mode,
            tools=self.config.agent.tools,
        )
        dest = self.agents_dest / f"{name}{self.config.source.extension}"
        self._write(dest, output, dry_run=dry_run)

        logger.info("Agent: %s", name)
        return Converted(kind=DocumentKind.AGENT, name=name, source=str(path), destination=str(dest))

    def command_output_name(self, name: str) -> str:
        """pm -> pm.md, status -> pm-status.md"""
        naming = self.config.naming
        ext = self.config.source.extension
        if name == naming.root_command:
            return f"{name}{ext}"
        return f"{naming.command_prefix}{name}{ext}"

    # -- Internals -----------------------------------------------------------

    def _document_files(self, directory: Path) -> list[Path]:
        ext = self.config.source.extension
        return sorted(
            p for p in directory.iterdir() if p.is_file() and p.name.endswith(ext)
        )

    def _logical_name(self, path: Path) -> str:
        ext = self.config.source.extension
        return path.name[: -len(ext)] if ext else path.name

    @staticmethod
    def _read(path: Path) -> str:
        # Bytes in, so CR and CRLF line endings reach the output untouched
        return path.read_bytes().decode("utf-8", errors="replace")

    @staticmethod
    def _write(dest: Path, content: str, *, dry_run: bool) -> None:
        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return
        dest.write_bytes(content.encode("utf-8"))
