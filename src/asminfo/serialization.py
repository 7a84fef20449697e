"""
Serialization helpers for AssemblyInfoConfig.

Configs travel as plain mappings keyed by the camelCase option names
(outputFile, companyName, customAttributes, ...). This module converts
between those mappings, JSON/YAML text and AssemblyInfoConfig objects.
Snake_case keys matching the dataclass fields are accepted as well.
"""
from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from asminfo.errors import ConfigError
from asminfo.model import AssemblyInfoConfig


# camelCase option name -> AssemblyInfoConfig field, in output order
OPTION_FIELDS: Dict[str, str] = {
    "outputFile": "output_file",
    "language": "language",
    "namespaces": "namespaces",
    "title": "title",
    "description": "description",
    "companyName": "company_name",
    "productName": "product_name",
    "copyright": "copyright",
    "trademark": "trademark",
    "comVisible": "com_visible",
    "comGuid": "com_guid",
    "version": "version",
    "fileVersion": "file_version",
    "customAttributes": "custom_attributes",
}

_FIELD_NAMES = set(OPTION_FIELDS.values())
_OPTION_NAMES = {field_name: key for key, field_name in OPTION_FIELDS.items()}

_STRING_FIELDS = (
    "output_file",
    "language",
    "title",
    "description",
    "company_name",
    "product_name",
    "copyright",
    "trademark",
    "com_guid",
    "version",
    "file_version",
)


def _field_for_key(key: str) -> str | None:
    if key in OPTION_FIELDS:
        return OPTION_FIELDS[key]
    if key in _FIELD_NAMES:
        return key
    return None


def config_from_dict(d: Mapping[str, Any]) -> AssemblyInfoConfig:
    """
    Build a config from an options mapping.

    Unknown keys are ignored with a UserWarning.

    Raises:
        ConfigError: If the mapping is not a mapping, a text option is not a
            string, comVisible is not a boolean, namespaces is not a list of
            strings, or customAttributes is not a mapping
    """
    if not isinstance(d, Mapping):
        raise ConfigError(f"config must be a mapping, got {type(d).__name__}")

    kwargs: Dict[str, Any] = {}
    for key, value in d.items():
        field_name = _field_for_key(key)
        if field_name is None:
            warnings.warn(f"Unknown config option ignored: {key}", UserWarning)
            continue
        kwargs[field_name] = value

    for field_name in _STRING_FIELDS:
        value = kwargs.get(field_name)
        if value is not None and not isinstance(value, str):
            # YAML reads 1.10 as the float 1.1
            raise ConfigError(
                f"{_OPTION_NAMES[field_name]} must be a string, got {type(value).__name__} {value!r}; "
                f"quote the value in the config file"
            )

    com_visible = kwargs.get("com_visible")
    if com_visible is not None and not isinstance(com_visible, bool):
        raise ConfigError(f"comVisible must be true or false, got {com_visible!r}")

    namespaces = kwargs.get("namespaces")
    if namespaces is None:
        kwargs.pop("namespaces", None)
    elif isinstance(namespaces, (str, bytes)) or not isinstance(namespaces, (list, tuple)):
        raise ConfigError("namespaces must be a list of strings")
    else:
        kwargs["namespaces"] = tuple(str(ns) for ns in namespaces)

    custom = kwargs.get("custom_attributes")
    if custom is not None:
        if not isinstance(custom, Mapping):
            raise ConfigError("customAttributes must be a mapping")
        kwargs["custom_attributes"] = dict(custom)

    return AssemblyInfoConfig(**kwargs)


def config_to_dict(config: AssemblyInfoConfig) -> Dict[str, Any]:
    """Convert a config to a camelCase options mapping, leaving out unset fields."""
    d: Dict[str, Any] = {}
    for key, field_name in OPTION_FIELDS.items():
        value = getattr(config, field_name)
        if value is None:
            continue
        if field_name == "namespaces":
            if not value:
                continue
            value = list(value)
        elif field_name == "custom_attributes":
            value = dict(value)
        d[key] = value
    return d


def config_to_json(config: AssemblyInfoConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2)


def config_from_json(s: str) -> AssemblyInfoConfig:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON config: {e}") from e
    return config_from_dict(d)


def config_to_yaml(config: AssemblyInfoConfig) -> str:
    # Keep option order; customAttributes order is significant
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(s: str) -> AssemblyInfoConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML config: {e}") from e
    return config_from_dict(d)


def load_config(path: Union[str, Path]) -> AssemblyInfoConfig:
    """
    Load a config file.

    ".json" files are parsed as JSON; anything else as YAML.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if path.suffix.lower() == ".json":
        return config_from_json(text)
    return config_from_yaml(text)
