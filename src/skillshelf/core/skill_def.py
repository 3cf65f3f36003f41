"""Skill definition models."""

import re
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentRole(StrEnum):
    """Document roles a skill can carry."""

    INSTRUCTIONS = "instructions"
    INSTRUCTIONS_LITE = "instructions_lite"
    QUICK_START = "quick_start"
    README = "readme"


# On-disk file name for each role inside skills/<skill-id>/
ROLE_FILENAMES: dict[DocumentRole, str] = {
    DocumentRole.README: "README.md",
    DocumentRole.QUICK_START: "QUICK_START.md",
    DocumentRole.INSTRUCTIONS: "copilot-instructions.md",
    DocumentRole.INSTRUCTIONS_LITE: "copilot-instructions-lite.md",
}

INSTALLABLE_ROLES = (DocumentRole.INSTRUCTIONS, DocumentRole.INSTRUCTIONS_LITE)

# Ids are folder names under skills/: no path separators, no leading dot
SKILL_ID_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class Skill(BaseModel):
    """A named bundle of instruction documents."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    description: str = ""
    documents: Mapping[DocumentRole, str] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("documents", mode="after")
    @classmethod
    def freeze_documents(
        cls, v: Mapping[DocumentRole, str]
    ) -> Mapping[DocumentRole, str]:
        return MappingProxyType(dict(v))

    @property
    def roles(self) -> list[DocumentRole]:
        """Roles present on this skill, in declaration order."""
        return [role for role in DocumentRole if role in self.documents]

    @property
    def installable(self) -> bool:
        return any(role in self.documents for role in INSTALLABLE_ROLES)

    def document(self, role: DocumentRole) -> str | None:
        return self.documents.get(role)
