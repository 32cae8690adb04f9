"""
Configuration Management for corebus

🔧 Unified Configuration System:
Dataclass configuration for dispatch behaviour and logging, loadable
from dictionaries, JSON/YAML files or environment variables.
"""

from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field
from enum import Enum
import json
import os
from pathlib import Path

from .errors import ConfigurationError


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class DispatchConfig:
    """Broadcast configuration"""
    enable_metrics: bool = True
    log_broadcasts: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class CoreConfig:
    """Complete corebus configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    dispatch: DispatchConfig = field(default_factory=DispatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Custom configuration
    custom: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'CoreConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.dispatch.log_broadcasts = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.dispatch.enable_metrics = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'CoreConfig':
        """Create configuration from dictionary"""
        try:
            environment = Environment(config_dict.get("environment", "development"))
        except ValueError as e:
            raise ConfigurationError(f"Unknown environment: {config_dict.get('environment')}") from e

        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        # Update nested configs
        for section in ("dispatch", "logging"):
            values = config_dict.get(section) or {}
            if not isinstance(values, dict):
                raise ConfigurationError(f"Section '{section}' must be a mapping")
            target = getattr(config, section)
            for key, value in values.items():
                if not hasattr(target, key):
                    raise ConfigurationError(f"Unknown {section} option: {key}")
                setattr(target, key, value)

        if "custom" in config_dict:
            config.custom.update(config_dict["custom"])

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'CoreConfig':
        """Load configuration from file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix == '.json':
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix in ('.yml', '.yaml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("PyYAML is required for YAML configuration files")
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Unsupported configuration file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_environment(cls) -> 'CoreConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('COREBUS_ENV', 'development')
        try:
            environment = Environment(env_name)
        except ValueError as e:
            raise ConfigurationError(f"Unknown COREBUS_ENV: {env_name}") from e

        config = cls.for_environment(environment)

        # Override with environment variables
        if os.getenv('COREBUS_DEBUG'):
            config.debug = os.getenv('COREBUS_DEBUG').lower() == 'true'

        if os.getenv('COREBUS_LOG_LEVEL'):
            config.logging.level = os.getenv('COREBUS_LOG_LEVEL').upper()

        if os.getenv('COREBUS_METRICS'):
            config.dispatch.enable_metrics = os.getenv('COREBUS_METRICS').lower() == 'true'

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "dispatch": {
                "enable_metrics": self.dispatch.enable_metrics,
                "log_broadcasts": self.dispatch.log_broadcasts
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count
            },
            "custom": self.custom
        }


# Global configuration management
_current_config: Optional[CoreConfig] = None


def set_config(config: Optional[CoreConfig]):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> CoreConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = CoreConfig.from_environment()

    return _current_config


def configure_from_file(config_path: Union[str, Path]) -> CoreConfig:
    """Configure corebus from file"""
    config = CoreConfig.from_file(config_path)
    set_config(config)
    return config


def configure_from_dict(config_dict: Dict[str, Any]) -> CoreConfig:
    """Configure corebus from dictionary"""
    config = CoreConfig.from_dict(config_dict)
    set_config(config)
    return config


__all__ = [
    "CoreConfig", "Environment", "DispatchConfig", "LoggingConfig",
    "set_config", "get_config", "configure_from_file", "configure_from_dict"
]
