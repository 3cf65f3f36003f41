"""Utilities package."""

from skillshelf.utils.def_loader import (
    atomic_write_text,
    discover_skill_dirs,
    parse_frontmatter,
    render_frontmatter,
)
from skillshelf.utils.logging import setup_logging

__all__ = [
    "atomic_write_text",
    "discover_skill_dirs",
    "parse_frontmatter",
    "render_frontmatter",
    "setup_logging",
]
