"""Configuration management for skillshelf."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from skillshelf.core.skill_def import DocumentRole

DEFAULT_INSTALL_PATH = Path(".github") / "copilot-instructions.md"
CONFIG_FILENAME = "config.user.yaml"


class LoggingConfig(BaseModel):
    """Log file settings."""

    filename: str = "skillshelf.log"
    max_bytes: int = Field(default=256 * 1024, gt=0)
    backup_count: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def filename_is_plain(self) -> "LoggingConfig":
        if Path(self.filename).name != self.filename:
            raise ValueError(f"logging.filename must be a file name, got: {self.filename}")
        return self


class Config(BaseModel):
    """
    Main configuration for skillshelf.

    Configuration is read from config.user.yaml in the workspace
    (~/.skillshelf/ by default). Every field has a default, so a workspace
    without a config file is valid.
    """

    workspace: Path
    skills_path: Path = Field(default=Path("skills"))
    logging_path: Path = Field(default=Path(".logs"))
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    include_builtin: bool = True
    default_role: DocumentRole = DocumentRole.INSTRUCTIONS
    install_path: Path = Field(default=DEFAULT_INSTALL_PATH)

    @model_validator(mode="after")
    def resolve_paths(self) -> "Config":
        """Resolve relative paths to absolute using workspace."""
        for field_name in ("skills_path", "logging_path"):
            path = getattr(self, field_name)
            if path.is_absolute():
                raise ValueError(f"{field_name} must be relative, got: {path}")
            setattr(self, field_name, self.workspace / path)

        # Resolved per target project at install time
        if self.install_path.is_absolute():
            raise ValueError(f"install_path must be relative, got: {self.install_path}")
        return self

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from a workspace directory.

        Args:
            workspace_dir: Path to the workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            ValueError: If the config file isn't a mapping or the configuration
                is invalid (pydantic's ValidationError is a ValueError)
            yaml.YAMLError: If the config file isn't valid YAML
        """
        user_data: dict[str, Any] = {}

        config_file = workspace_dir / CONFIG_FILENAME
        if config_file.exists():
            with open(config_file) as f:
                user_data = yaml.safe_load(f) or {}
            if not isinstance(user_data, dict):
                raise ValueError(f"{config_file} must contain a mapping")

        return cls.model_validate({**user_data, "workspace": workspace_dir})

    @property
    def log_file(self) -> Path:
        return self.logging_path / self.logging.filename

    def install_destination(self, project: Path) -> Path:
        """Default install target inside a project root."""
        return project / self.install_path
