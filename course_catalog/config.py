"""Configuration loader for the course catalog reader.

Loads configuration from:
1. Default values (hardcoded)
2. config.yaml file (if exists)
3. .env file and environment variables (highest priority)

Environment variables use the pattern: CCAT_SECTION__KEY
Examples:
    CCAT_STORE__PATH=/path/to/ClientDatabase.sqlite
    CCAT_LOGGING__LEVEL=DEBUG
    CCAT_EXPORT__INDENT=4
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError, MissingConfigError
from .logging_config import get_logger

logger = get_logger('config')

ENV_PREFIX = "CCAT_"


@dataclass
class StoreConfig:
    """Catalog store location."""
    path: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    json_format: bool = False


@dataclass
class ExportConfig:
    """JSON export configuration."""
    indent: int = 2


@dataclass
class Config:
    """Main configuration container."""
    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _deep_update(base: dict, updates: dict) -> dict:
    """Recursively update a dictionary."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _apply_env_overrides(config_dict: dict) -> dict:
    """Apply CCAT_SECTION__KEY environment overrides.

    Values are converted to the type of the existing default.
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        path = key[len(ENV_PREFIX):].lower().split("__")
        if len(path) < 2:
            continue

        current = config_dict
        for part in path[:-1]:
            if part not in current or (current is config_dict and current[part] is None):
                current[part] = {}
            elif not isinstance(current[part], dict):
                raise ConfigurationError(
                    f"{key} addresses a key below the setting '{part}'",
                    config_key='.'.join(path),
                )
            current = current[part]

        final_key = path[-1]
        original = current.get(final_key)
        try:
            if isinstance(original, bool):
                value = value.lower() in ('true', '1', 'yes')
            elif isinstance(original, int):
                value = int(value)
        except ValueError:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r}", config_key='.'.join(path)
            )

        current[final_key] = value
        logger.debug(f"Applied env override: {key}")

    return config_dict


def _section(cls, values) -> object:
    """Build a config section, ignoring unknown keys."""
    if not isinstance(values, dict):
        return cls()
    return cls(**{k: v for k, v in values.items() if k in cls.__dataclass_fields__})


def _dict_to_config(config_dict: dict) -> Config:
    """Convert a dictionary to the Config dataclass."""
    return Config(
        store=_section(StoreConfig, config_dict.get('store', {})),
        logging=_section(LoggingConfig, config_dict.get('logging', {})),
        export=_section(ExportConfig, config_dict.get('export', {})),
    )


def _validate(config: Config) -> None:
    """Reject values that would only fail once they are used."""
    level = config.logging.level
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigurationError(
            f"Invalid log level: {level!r}", config_key='logging.level'
        )


def _find_config_file() -> Optional[Path]:
    for path in (Path("config.yaml"), Path("config.yml")):
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Path to config file. If None, looks for config.yaml
                    or config.yml in the working directory.

    Returns:
        Config object with all settings loaded

    Raises:
        ConfigurationError: If the config file cannot be read or parsed
    """
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)

    config_dict = asdict(Config())

    path = Path(config_path) if config_path else _find_config_file()
    if path is not None:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config file {path}: {e}")
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        config_dict = _deep_update(config_dict, file_config)
        logger.debug(f"Loaded config from: {path}")

    config_dict = _apply_env_overrides(config_dict)

    config = _dict_to_config(config_dict)
    _validate(config)
    return config


def require_store_path(config: Config) -> str:
    """Return the configured store path or raise MissingConfigError."""
    if not config.store.path:
        raise MissingConfigError('store.path')
    return str(Path(config.store.path).expanduser())

