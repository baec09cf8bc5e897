"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from french_workdays.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Environment variable -> config field, optionally with a converter
    ENV_MAPPINGS = {
        "FRENCH_WORKDAYS_CACHE_ENABLED": ("cache_enabled", "bool"),
        "FRENCH_WORKDAYS_OUTPUT_FORMAT": "output_format",
        "FRENCH_WORKDAYS_OUTPUT_DIRECTORY": "output_directory",
        "FRENCH_WORKDAYS_API_HOST": "api_host",
        "FRENCH_WORKDAYS_API_PORT": ("api_port", "int"),
        "FRENCH_WORKDAYS_LOG_LEVEL": "log_level",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            config = Config(**config_dict)
        except ValueError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        logger.debug("Loaded configuration from %s", self.config_path)
        return config

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.info("Config file %s not found, using defaults", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                return self._flatten_config(config) if config else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        # Handle holidays section
        if "holidays" in config:
            hol = config["holidays"] or {}
            if "cache_enabled" in hol:
                result["cache_enabled"] = hol["cache_enabled"]

        # Handle output section
        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        # Handle API section
        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        # Handle logging section
        if "logging" in config:
            log = config["logging"] or {}
            if "level" in log:
                result["log_level"] = log["level"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        converters = {"bool": self._parse_bool, "int": int}

        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, converter_name = mapping
                try:
                    config_dict[config_key] = converters[converter_name](env_value)
                except ValueError:
                    logger.warning("Ignoring invalid value for %s: %r", env_var, env_value)
            else:
                config_dict[mapping] = env_value

        return config_dict

    def _parse_bool(self, value: str) -> bool:
        """Parse a boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "holidays": {
                "cache_enabled": config.cache_enabled,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        # Ensure directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
