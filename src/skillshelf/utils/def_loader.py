"""Shared utilities for reading and writing skill definition files."""

import contextlib
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Delimiters may end in CRLF; the body keeps whatever line endings it had
_FRONTMATTER_RE = re.compile(r"---\r?\n(?:(.*?)\r?\n)?---(?:\r?\n|\Z)", re.DOTALL)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """
    Split YAML frontmatter from a markdown body.

    Args:
        content: Raw file content

    Returns:
        Tuple of (frontmatter dict, body). The dict is empty when the content
        has no frontmatter block or the block is not a mapping.

    Raises:
        yaml.YAMLError: If the frontmatter block is not valid YAML
    """
    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return {}, content

    body = content[match.end() :]
    raw = yaml.safe_load(match.group(1) or "") or {}
    if not isinstance(raw, dict):
        return {}, body
    return raw, body


def render_frontmatter(frontmatter: dict[str, Any], body: str) -> str:
    """
    Build file content from a frontmatter dict and a markdown body.

    The body is appended as-is, so parse_frontmatter(render_frontmatter(fm, b))
    returns (fm, b).
    """
    yaml_content = yaml.dump(
        frontmatter, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
    return f"---\n{yaml_content}---\n{body}"


def discover_skill_dirs(path: Path) -> list[Path]:
    """
    List candidate skill directories under a skills root.

    Args:
        path: Directory containing one folder per skill

    Returns:
        Subdirectories sorted by name, skipping private ones (leading "_" or
        "."); empty if the root doesn't exist
    """
    if not path.exists():
        logger.warning(f"Skills directory not found: {path}")
        return []

    return sorted(
        (
            entry
            for entry in path.iterdir()
            if entry.is_dir() and not entry.name.startswith(("_", "."))
        ),
        key=lambda entry: entry.name,
    )


def atomic_write_text(path: Path, content: str) -> Path:
    """
    Write text to path so readers see either the old file or the new one.

    Content goes to a temporary file in the destination directory and is then
    renamed over the target. Parent directories are created as needed.

    Args:
        path: Destination file
        content: Text to write (UTF-8, newlines untranslated)

    Returns:
        The destination path

    Raises:
        OSError: If the directory can't be created or the write/rename fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise

    return path
