"""Shared test fixtures for plugin-translate."""

from pathlib import Path

import pytest

from plugin_translate.config.models import TranslateConfig

STATUS_COMMAND = """\
---
description: Show project status
allowed-tools: Bash, Read
---

Run /pm:status and then /design:review.
"""

PM_COMMAND = """\
---
description: Project manager entry point
---

Start with /pm:init, then /backlog:groom.
"""

UNDESCRIBED_COMMAND = """\
---
allowed-tools: Bash
---

This command has no description.
"""

PLANNER_AGENT = """\
---
name: planner
description: Breaks work into tasks
model: opus
---

You are a planner. Use /pm:plan.

---

Second section after a horizontal rule.
"""

REVIEWER_AGENT = """\
---
name: reviewer
description: Reviews designs
---

Review everything.
"""


def write_plugin(root: Path, commands: dict[str, str], agents: dict[str, str]) -> Path:
    """Lay out a plugin root with commands/ and agents/ source directories."""
    (root / "commands").mkdir(parents=True, exist_ok=True)
    (root / "agents").mkdir(parents=True, exist_ok=True)
    for name, content in commands.items():
        (root / "commands" / name).write_text(content, encoding="utf-8")
    for name, content in agents.items():
        (root / "agents" / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def sample_config():
    return TranslateConfig()


@pytest.fixture
def plugin_root(tmp_path):
    """A plugin with two commands, one undescribed command and two agents."""
    return write_plugin(
        tmp_path / "plugin",
        commands={
            "status.md": STATUS_COMMAND,
            "pm.md": PM_COMMAND,
            "broken.md": UNDESCRIBED_COMMAND,
            "notes.txt": "not a document",
        },
        agents={
            "planner.md": PLANNER_AGENT,
            "reviewer.md": REVIEWER_AGENT,
        },
    )
