"""Skills bundled with skillshelf."""

from pathlib import Path


def builtin_skills_path() -> Path:
    """Directory holding the bundled skill folders."""
    return Path(__file__).parent
