"""Core skill store functionality."""

from .exceptions import MissingRoleError, NotFoundError, SkillStoreError, ValidationError
from .skill_def import (
    INSTALLABLE_ROLES,
    ROLE_FILENAMES,
    SKILL_ID_PATTERN,
    DocumentRole,
    Skill,
)
from .skill_store import SkillStore

__all__ = [
    "DocumentRole",
    "INSTALLABLE_ROLES",
    "MissingRoleError",
    "NotFoundError",
    "ROLE_FILENAMES",
    "SKILL_ID_PATTERN",
    "Skill",
    "SkillStore",
    "SkillStoreError",
    "ValidationError",
]
