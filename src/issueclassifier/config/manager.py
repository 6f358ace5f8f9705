"""Locating, loading and writing the YAML configuration file."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import IssueClassifierConfig


class ConfigManager:
    """Loads IssueClassifierConfig from YAML and writes it back."""

    SEARCH_PATHS = (
        Path("config/issueclassifier.yaml"),
        Path.home() / ".config" / "issueclassifier" / "config.yaml",
    )

    def __init__(self, config_path: Path | None = None):
        """
        Args:
            config_path: Explicit config file. When set, the search paths are
                not consulted.
        """
        self.config_path = config_path

    def find(self) -> Path | None:
        """Return the config file that would be loaded, if any exists."""
        if self.config_path is not None:
            return self.config_path if self.config_path.is_file() else None
        return next((p for p in self.SEARCH_PATHS if p.is_file()), None)

    def load(self, create_if_missing: bool = True) -> IssueClassifierConfig:
        """
        Load and validate the configuration.

        Args:
            create_if_missing: Return defaults when no file exists.

        Raises:
            FileNotFoundError: If no file exists and create_if_missing is False.
            ConfigurationError: If the file is not valid YAML or fails validation.
        """
        config_file = self.find()
        if config_file is None:
            if create_if_missing:
                return IssueClassifierConfig()
            searched = [self.config_path] if self.config_path else list(self.SEARCH_PATHS)
            raise FileNotFoundError(f"No configuration file found. Searched: {searched}")

        try:
            raw = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
            config = IssueClassifierConfig(**raw)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file {config_file}: {e}") from e
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e

        self.config_path = config_file
        return config

    def save(self, config: IssueClassifierConfig, path: Path | None = None) -> Path:
        """
        Write a configuration as YAML.

        Args:
            config: Configuration to write
            path: Target file; defaults to config_path, then the first search path

        Returns:
            The path written to
        """
        target = path or self.config_path or self.SEARCH_PATHS[0]
        target.parent.mkdir(parents=True, exist_ok=True)

        # mode="json" turns Path values into strings
        with open(target, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config.model_dump(mode="json"),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        self.config_path = target
        return target
