"""Translation pipeline for turning Claude Code plugin docs into OpenCode files."""

from .frontmatter import extract_body, extract_frontmatter
from .model_map import map_model
from .models import Converted, DocumentKind, Skipped, TranslateReport
from .pipeline import Transform, TransformPipeline
from .refs import CommandRefRewriter, default_pipeline, translate_command_refs
from .serializer import render_agent, render_command
from .translator import PluginTranslator

__all__ = [
    "CommandRefRewriter",
    "Converted",
    "DocumentKind",
    "PluginTranslator",
    "Skipped",
    "Transform",
    "TransformPipeline",
    "TranslateReport",
    "default_pipeline",
    "extract_body",
    "extract_frontmatter",
    "map_model",
    "render_agent",
    "render_command",
    "translate_command_refs",
]
