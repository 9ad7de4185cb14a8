"""Flat key/value frontmatter extraction for plugin markdown documents."""

from __future__ import annotations

import re

_FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---", re.DOTALL)

DELIMITER = "---"


def extract_frontmatter(content: str) -> dict[str, str]:
    """Return the ``key: value`` pairs of the leading ``---`` block.

    Values are kept as raw strings. Lines without a key before the first
    colon are ignored and later duplicates win. Returns an empty dict when
    the document does not open with a frontmatter block.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}

    fields: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        if not sep or not key:
            continue
        fields[key.strip()] = value.strip()
    return fields


def extract_body(content: str) -> str:
    """Return everything after the second ``---``, stripped.

    Further ``---`` sequences (markdown horizontal rules) belong to the body.
    """
    parts = content.split(DELIMITER)
    # parts[0] precedes the header, parts[1] is the header itself
    if len(parts) < 3:
        return ""
    return DELIMITER.join(parts[2:]).strip()
