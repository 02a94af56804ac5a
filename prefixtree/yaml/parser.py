"""YAML parsing and validation for dictionary documents.

This module handles parsing dictionary.yaml files and validating their
structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Union

try:
    import yaml
except ImportError:
    yaml = None


@dataclass
class DictionaryConfig:
    """Parsed dictionary document."""
    config: Dict[str, Any] = field(default_factory=dict)
    entries: Dict[str, Any] = field(default_factory=dict)


class DictionaryParseError(Exception):
    """Error parsing or validating a dictionary document."""
    pass


def _ensure_yaml_available():
    """Raise ImportError if PyYAML is not installed."""
    if yaml is None:
        raise ImportError(
            "PyYAML is required for YAML dictionaries. "
            "Install it with: pip install pyyaml"
        )


def parse_yaml_file(path: Union[str, Path]) -> DictionaryConfig:
    """Parse and validate a dictionary.yaml file.

    Args:
        path: Path to the YAML file

    Returns:
        DictionaryConfig with parsed configuration and entries

    Raises:
        DictionaryParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
        ImportError: If PyYAML is not installed
    """
    _ensure_yaml_available()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path) as f:
        return _load(f)


def parse_yaml_string(content: str) -> DictionaryConfig:
    """Parse a dictionary document from a string.

    Args:
        content: YAML content as string

    Returns:
        DictionaryConfig with parsed configuration and entries
    """
    _ensure_yaml_available()
    return _load(content)


def _load(stream) -> DictionaryConfig:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise DictionaryParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise DictionaryParseError("YAML root must be a mapping")

    return _validate_yaml_data(data)


def _validate_yaml_data(data: Dict[str, Any]) -> DictionaryConfig:
    """Validate parsed YAML data structure.

    Args:
        data: Parsed YAML dictionary

    Returns:
        Validated DictionaryConfig

    Raises:
        DictionaryParseError: If validation fails
    """
    config = data.get('config') or {}
    if not isinstance(config, dict):
        raise DictionaryParseError("'config' must be a mapping")
    _validate_config(config)

    entries = data.get('entries') or {}
    if not isinstance(entries, dict):
        raise DictionaryParseError("'entries' must be a mapping")

    for key in entries:
        if not isinstance(key, str):
            # Unquoted keys like 1 or yes load as int/bool
            raise DictionaryParseError(
                f"Entry key {key!r} must be a string (quote it in YAML)"
            )

    return DictionaryConfig(config=config, entries=entries)


def _validate_config(config: Dict[str, Any]) -> None:
    """Validate the optional config mapping.

    Args:
        config: The 'config' mapping

    Raises:
        DictionaryParseError: If validation fails
    """
    if 'lowercase' in config and not isinstance(config['lowercase'], bool):
        raise DictionaryParseError("'config.lowercase' must be a boolean")

    if 'alphabet' in config:
        alphabet = config['alphabet']
        if not isinstance(alphabet, str) or not alphabet:
            raise DictionaryParseError(
                "'config.alphabet' must be a non-empty string"
            )
