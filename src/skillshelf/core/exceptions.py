"""Custom exceptions for skillshelf."""


class SkillStoreError(Exception):
    """Base class for skill store errors."""


class NotFoundError(SkillStoreError):
    """Skill id is not registered."""

    def __init__(self, skill_id: str):
        super().__init__(f"Skill not found: {skill_id}")
        self.skill_id = skill_id


class MissingRoleError(SkillStoreError):
    """Skill has no document for the requested role."""

    def __init__(self, skill_id: str, role: str):
        super().__init__(f"Skill '{skill_id}' has no {role} document")
        self.skill_id = skill_id
        self.role = role


class ValidationError(SkillStoreError):
    """Skill cannot be registered."""

    def __init__(self, skill_id: str, reason: str):
        super().__init__(f"Invalid skill '{skill_id}': {reason}")
        self.skill_id = skill_id
        self.reason = reason
