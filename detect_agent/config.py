"""Configuration management for detect-agent using Pydantic Settings.

Loads configuration from environment variables and YAML config files.
Config file locations:
  - Linux: ~/.config/detect-agent/config.yaml
  - macOS: ~/Library/Application Support/detect-agent/config.yaml
  - Windows: %LOCALAPPDATA%/detect-agent/config.yaml
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from platformdirs import user_config_dir

APP_NAME = "detect-agent"


def default_config_path() -> Path:
    """Get the default config file location for this platform."""
    return Path(user_config_dir(APP_NAME, appauthor=False)) / "config.yaml"


class DetectAgentConfig(BaseSettings):
    """Main configuration class for detect-agent.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. Config file at ~/.config/detect-agent/config.yaml
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="DETECT_AGENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    probe_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds allowed for each lookup or version probe"
    )

    json_output: bool = Field(
        default=False,
        description="Print JSON instead of the text table by default"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    config_path: Optional[Path] = Field(
        default=None,
        description="Custom config file path"
    )

    def __init__(self, **kwargs):
        """Initialize configuration with default paths."""
        super().__init__(**kwargs)

        if self.config_path is None:
            self.config_path = default_config_path()

    @classmethod
    def load_from_file(cls, config_path: Optional[Path] = None) -> "DetectAgentConfig":
        """Load configuration from YAML file.

        Environment variables still take precedence over file values.

        Args:
            config_path: Optional custom config file path. Defaults to
                DETECT_AGENT_CONFIG_PATH, then the platform config dir.

        Returns:
            DetectAgentConfig instance with loaded settings

        Raises:
            ValueError: If the file is not valid YAML, is not a mapping or
                holds invalid values.
        """
        import yaml

        env = cls()
        if config_path is None:
            config_path = env.config_path

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

            if not isinstance(data, dict):
                raise ValueError(
                    f"Config file {config_path} must contain a mapping, "
                    f"got {type(data).__name__}"
                )

            # Only fill fields the environment leaves unset
            overridden = env.model_fields_set | {"config_path"}
            data = {k: v for k, v in data.items() if k not in overridden}
            return cls(config_path=config_path, **data)

        return cls(config_path=config_path)
