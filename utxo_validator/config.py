# utxo_validator/config.py
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any
from pathlib import Path
import yaml
from utxo_validator.crypto.signatures import SUPPORTED_CURVES
from utxo_validator.utils.logging_config import LogFormat, setup_logging
from utxo_validator.exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None
    max_size: int = 10485760
    backup_count: int = 5
    format: str = LogFormat.DETAILED.value


@dataclass
class ValidationConfig:
    log_rejections: bool = True
    curve: str = "secp256k1"


@dataclass
class ValidatorConfig:
    """Top-level configuration for embedding the validator"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def from_file(cls, config_path: str) -> 'ValidatorConfig':
        """Load configuration from YAML file"""
        config_file = Path(config_path)
        if not config_file.exists():
            # Return defaults if file doesn't exist
            return cls()

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> 'ValidatorConfig':
        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration root must be a mapping")
        try:
            return cls(
                logging=LoggingConfig(**(config_data.get('logging') or {})),
                validation=ValidationConfig(**(config_data.get('validation') or {}))
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration option: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            'logging': asdict(self.logging),
            'validation': asdict(self.validation)
        }

    def save(self, config_path: str):
        """Save configuration to file"""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False)

    def apply_logging(self):
        """Install the configured handlers on the utxo_validator logger"""
        return setup_logging(
            log_level=self.logging.level,
            log_file=self.logging.file,
            max_bytes=self.logging.max_size,
            backup_count=self.logging.backup_count,
            log_format=self.logging.format
        )

    def validate(self):
        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log level: {self.logging.level}")

        if self.logging.format.lower() not in [fmt.value for fmt in LogFormat]:
            raise ConfigurationError(f"Invalid log format: {self.logging.format}")

        if self.logging.max_size <= 0:
            raise ConfigurationError("logging.max_size must be positive")

        if self.logging.backup_count < 0:
            raise ConfigurationError("logging.backup_count cannot be negative")

        if self.validation.curve.lower() not in SUPPORTED_CURVES:
            raise ConfigurationError(f"Unsupported curve: {self.validation.curve}")


# Global configuration instance
_config_instance: Optional[ValidatorConfig] = None

def init_config(config_path: Optional[str] = None) -> ValidatorConfig:
    """Initialize global configuration"""
    global _config_instance

    if config_path:
        config = ValidatorConfig.from_file(config_path)
    else:
        config = ValidatorConfig()

    config.validate()
    _config_instance = config
    return _config_instance

def get_config() -> ValidatorConfig:
    """Get global configuration, initializing defaults on first use"""
    if _config_instance is None:
        return init_config()
    return _config_instance
