"""Skill store for registering, discovering and installing skills."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from skillshelf.core.exceptions import MissingRoleError, NotFoundError, ValidationError
from skillshelf.core.skill_def import (
    ROLE_FILENAMES,
    SKILL_ID_PATTERN,
    DocumentRole,
    Skill,
)
from skillshelf.skills import builtin_skills_path
from skillshelf.utils.def_loader import (
    atomic_write_text,
    discover_skill_dirs,
    parse_frontmatter,
    render_frontmatter,
)

if TYPE_CHECKING:
    from skillshelf.utils.config import Config

logger = logging.getLogger(__name__)

# Documents checked, in order, for a frontmatter description
_DESCRIPTION_SOURCES = (DocumentRole.README, DocumentRole.INSTRUCTIONS)


class SkillStore:
    """
    In-memory registry of skills keyed by id.

    Skills are replaced whole, never edited in place. A store built with
    `from_config` remembers its source directories so `reload` can rebuild
    it from disk.
    """

    @staticmethod
    def from_config(config: Config) -> SkillStore:
        """Create a SkillStore loaded from the bundled and workspace skills."""
        sources = []
        if config.include_builtin:
            sources.append(builtin_skills_path())
        sources.append(config.skills_path)

        store = SkillStore(sources)
        store.reload()
        return store

    def __init__(self, sources: list[Path] | None = None):
        self.sources = list(sources or [])
        self._skills: dict[str, Skill] = {}

    def __contains__(self, skill_id: object) -> bool:
        return skill_id in self._skills

    def __len__(self) -> int:
        return len(self._skills)

    def register(self, skill: Skill) -> None:
        """
        Add a skill, replacing any existing entry with the same id.

        Raises:
            ValidationError: If the id is blank or not a valid folder name,
                or the skill has no instructions document of either kind
        """
        _check_id(skill.id)
        if not skill.installable:
            raise ValidationError(
                skill.id, "needs an instructions or instructions_lite document"
            )

        if skill.id in self._skills:
            logger.debug(f"Replacing skill '{skill.id}'")
        self._skills[skill.id] = skill

    def get(self, skill_id: str) -> Skill:
        """
        Look up a skill by id.

        Raises:
            NotFoundError: If no skill with this id is registered
        """
        try:
            return self._skills[skill_id]
        except KeyError:
            raise NotFoundError(skill_id) from None

    def remove(self, skill_id: str) -> Skill:
        """Unregister a skill and return it."""
        try:
            return self._skills.pop(skill_id)
        except KeyError:
            raise NotFoundError(skill_id) from None

    def list(self) -> list[tuple[str, str]]:
        """Return (id, description) for every skill, sorted by id."""
        return [
            (skill_id, self._skills[skill_id].description)
            for skill_id in sorted(self._skills)
        ]

    def install(
        self, skill_id: str, role: DocumentRole | str, destination: Path | str
    ) -> Path:
        """
        Copy one of a skill's documents to a destination file.

        Parent directories are created and an existing file is overwritten.
        The write is atomic: on failure the destination is left untouched.

        Args:
            skill_id: Skill to install from
            role: Document role to copy
            destination: Target file path

        Returns:
            The destination path

        Raises:
            NotFoundError: If the skill is unknown
            MissingRoleError: If the skill has no document for the role
            OSError: If the file can't be written
        """
        skill = self.get(skill_id)

        try:
            role = DocumentRole(role)
        except ValueError:
            raise MissingRoleError(skill_id, str(role)) from None

        content = skill.document(role)
        if content is None:
            raise MissingRoleError(skill_id, role.value)

        path = atomic_write_text(Path(destination), content)
        logger.info(f"Installed {role.value} of '{skill_id}' to {path}")
        return path

    def load_directory(self, path: Path) -> list[Skill]:
        """
        Register every valid skill found under a skills root.

        Folders that don't form a valid skill are skipped with a warning.

        Args:
            path: Directory laid out as <path>/<skill-id>/<role files>

        Returns:
            Skills registered from this directory, in id order
        """
        loaded = []
        for skill_dir in discover_skill_dirs(path):
            try:
                skill = self.read_skill(skill_dir)
                self.register(skill)
            except (ValidationError, OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping skill folder {skill_dir.name}: {e}")
                continue
            loaded.append(skill)

        logger.debug(f"Loaded {len(loaded)} skill(s) from {path}")
        return loaded

    def reload(self) -> None:
        """Drop all skills and load them again from the source directories."""
        self._skills.clear()
        for source in self.sources:
            self.load_directory(source)

    @staticmethod
    def read_skill(skill_dir: Path) -> Skill:
        """
        Build a Skill from one skill folder.

        Raises:
            OSError: If a present document can't be read
        """
        documents = {}
        for role, filename in ROLE_FILENAMES.items():
            doc_file = skill_dir / filename
            if doc_file.is_file():
                # newline="" keeps CRLF intact so installs are byte-for-byte
                with open(doc_file, encoding="utf-8", newline="") as f:
                    documents[role] = f.read()

        return Skill(
            id=skill_dir.name,
            description=_read_description(skill_dir.name, documents),
            documents=documents,
        )

    @staticmethod
    def save(skill: Skill, base_path: Path) -> Path:
        """
        Write a skill to <base_path>/<skill-id>/ using the standard file names.

        A description that no document already carries is written into the
        README frontmatter (creating the README if needed), so `read_skill`
        gets it back.

        Returns:
            The skill directory

        Raises:
            ValidationError: If the id is not a valid folder name
            OSError: If a file can't be written
        """
        _check_id(skill.id)

        documents = dict(skill.documents)
        if skill.description and (
            _read_description(skill.id, documents) != skill.description
        ):
            documents[DocumentRole.README] = _with_description(
                documents.get(DocumentRole.README, ""), skill.description
            )

        skill_dir = base_path / skill.id
        for role, content in documents.items():
            atomic_write_text(skill_dir / ROLE_FILENAMES[role], content)
        return skill_dir


def _check_id(skill_id: str) -> None:
    if not skill_id or not skill_id.strip():
        raise ValidationError(skill_id, "id must not be empty")
    if not SKILL_ID_PATTERN.fullmatch(skill_id):
        raise ValidationError(
            skill_id, "id may only use letters, digits, '.', '_' and '-'"
        )


def _with_description(content: str, description: str) -> str:
    try:
        frontmatter, body = parse_frontmatter(content)
    except yaml.YAMLError:
        # Broken block stays in the body; the new one is read first
        frontmatter, body = {}, content
    if body == content and content:
        # New block: keep a blank line before the existing text
        body = f"\n{content}"
    return render_frontmatter({**frontmatter, "description": description}, body)


def _read_description(skill_id: str, documents: Mapping[DocumentRole, str]) -> str:
    for role in _DESCRIPTION_SOURCES:
        content = documents.get(role)
        if content is None:
            continue
        try:
            frontmatter, _ = parse_frontmatter(content)
        except yaml.YAMLError as e:
            logger.warning(f"Bad frontmatter in {role.value} of '{skill_id}': {e}")
            continue
        description = frontmatter.get("description")
        if description:
            return str(description).strip()
    return ""
