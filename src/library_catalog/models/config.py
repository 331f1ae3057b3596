"""Configuration model for library catalog."""

from pathlib import Path
from typing import Any, Dict, List
import json
from dataclasses import dataclass, field

import jsonschema

from ..domain.entities import DEFAULT_SEPARATOR
from ..exceptions import ConfigurationError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# JSON Schema for configuration files
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "display": {
            "type": "object",
            "properties": {
                "separator": {
                    "type": "string",
                    "description": "Line printed after each displayed source"
                },
                "color": {
                    "type": "boolean",
                    "description": "Style status messages"
                }
            },
            "additionalProperties": False
        },
        "input": {
            "type": "object",
            "properties": {
                "reprompt_on_invalid": {
                    "type": "boolean",
                    "description": "Ask again when a number cannot be parsed"
                }
            },
            "additionalProperties": False
        },
        "log_level": {
            "type": "string",
            "enum": LOG_LEVELS
        }
    },
    "additionalProperties": False
}


@dataclass
class DisplayConfig:
    """Configuration for console rendering."""
    separator: str = DEFAULT_SEPARATOR
    color: bool = True


@dataclass
class InputConfig:
    """Configuration for reading console input."""
    reprompt_on_invalid: bool = True


@dataclass
class Config:
    """Main configuration model."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    input: InputConfig = field(default_factory=InputConfig)
    log_level: str = "WARNING"


def _dataclass_to_dict(obj):
    """Convert dataclass to dict recursively."""
    from dataclasses import is_dataclass, asdict
    if is_dataclass(obj):
        return {key: _dataclass_to_dict(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, dict):
        return {key: _dataclass_to_dict(value) for key, value in obj.items()}
    return obj


def _dict_to_dataclass(data, dataclass_type):
    """Convert dict to dataclass recursively."""
    from dataclasses import is_dataclass, fields
    if not is_dataclass(dataclass_type):
        return data

    kwargs = {}
    for f in fields(dataclass_type):
        if f.name not in data:
            continue
        if hasattr(f.type, '__dataclass_fields__'):
            kwargs[f.name] = _dict_to_dataclass(data[f.name], f.type)
        else:
            kwargs[f.name] = data[f.name]

    return dataclass_type(**kwargs)


def validate_config_json(config_data: Dict[str, Any]) -> List[str]:
    """Validate a configuration JSON object.

    Returns:
        List of validation error messages
    """
    try:
        jsonschema.validate(config_data, CONFIG_SCHEMA)
        return []
    except jsonschema.ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        return [f"Validation error at {path}: {e.message}"]


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file.

    Raises:
        ConfigurationError: If the file cannot be read, is not JSON, or
            does not match CONFIG_SCHEMA.
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"{config_path}: JSON parsing error: {e.msg} at line {e.lineno}, column {e.colno}"
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    errors = validate_config_json(config_data)
    if errors:
        raise ConfigurationError(f"{config_path}: {'; '.join(errors)}")

    return _dict_to_dataclass(config_data, Config)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = _dataclass_to_dict(config)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config(), config_path)
