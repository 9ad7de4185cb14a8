"""Generate OpenCode commands and agents from Claude Code plugin sources."""

__version__ = "0.1.0"
