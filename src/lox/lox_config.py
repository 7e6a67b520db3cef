"""Configuration for the Lox command-line host."""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml


@dataclass
class LoxConfig:
    """Settings for running scripts and the interactive prompt."""

    prompt: str = "> "
    log_level: str = "WARNING"
    log_file: str | None = None
    show_tokens: bool = False
    show_ast: bool = False

    @classmethod
    def load_from_file(cls, config_path: str) -> 'LoxConfig':
        """
        Load configuration from a YAML file.

        Keys that do not name a setting are ignored.

        Args:
            config_path: Path to the YAML file

        Returns:
            Configuration with file values applied over the defaults

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not contain a YAML mapping
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LoxConfig':
        """Build a configuration from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
