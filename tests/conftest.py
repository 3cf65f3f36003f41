"""Shared test fixtures for skillshelf test suite."""

import logging
from pathlib import Path

import pytest

from skillshelf.core.skill_def import Skill
from skillshelf.core.skill_store import SkillStore
from skillshelf.utils.config import Config


@pytest.fixture(autouse=True)
def reset_skillshelf_logger():
    """Drop handlers added by setup_logging between tests."""
    yield
    logger = logging.getLogger("skillshelf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config with workspace pointing to tmp_path, bundled skills off."""
    return Config(workspace=tmp_path, include_builtin=False)


@pytest.fixture
def token_saver() -> Skill:
    """Minimal installable skill."""
    return Skill(
        id="token-saver",
        documents={"instructions": "RULE A", "quick_start": "STEP 1"},
    )


@pytest.fixture
def store(token_saver: Skill) -> SkillStore:
    """SkillStore holding the token-saver skill."""
    store = SkillStore()
    store.register(token_saver)
    return store


@pytest.fixture
def temp_skills_dir(tmp_path: Path) -> Path:
    """Temporary skills directory."""
    skills_dir = tmp_path / "skills"
    skills_dir.mkdir(parents=True)
    return skills_dir


@pytest.fixture
def write_skill_folder():
    """Factory creating <base>/<skill_id>/ from a file name -> content map."""

    def _write(base: Path, skill_id: str, files: dict[str, str]) -> Path:
        skill_dir = base / skill_id
        skill_dir.mkdir(parents=True)
        for name, content in files.items():
            (skill_dir / name).write_text(content)
        return skill_dir

    return _write
