"""Configuration management for graphql-client-completion."""

from dataclasses import dataclass, field
from typing import Optional

import yaml

from . import utils

WORKSPACE_CONFIG_NAME = ".graphql-client.yaml"


def _default_scalar_mappings() -> dict[str, str]:
    return {"Int": "Integer", "ID": "String"}


def _default_scalar_annotations() -> dict[str, str]:
    return {"ID": "@Id"}


@dataclass
class Config:
    """Configuration for graphql-client-completion."""

    schema_file_name: str = "schema.graphql"
    scalar_mappings: dict[str, str] = field(default_factory=_default_scalar_mappings)
    scalar_annotations: dict[str, str] = field(default_factory=_default_scalar_annotations)
    non_null_annotation: str = "@NonNull"
    name_annotation: str = "@Name"
    list_type: str = "List"
    log_level: str = "WARNING"


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path("~/.graphql-client-completion/config.yaml")


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Return defaults if config doesn't exist
    if not utils.exists(config_path):
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    defaults = Config()
    return Config(
        schema_file_name=data.get("schema_file_name", defaults.schema_file_name),
        scalar_mappings=_merged(defaults.scalar_mappings, data, "scalar_mappings"),
        scalar_annotations=_merged(defaults.scalar_annotations, data, "scalar_annotations"),
        non_null_annotation=data.get("non_null_annotation", defaults.non_null_annotation),
        name_annotation=data.get("name_annotation", defaults.name_annotation),
        list_type=data.get("list_type", defaults.list_type),
        log_level=data.get("log_level", defaults.log_level),
    )


def _merged(defaults: dict[str, str], data: dict, key: str) -> dict[str, str]:
    """
    Merge a mapping from the config file over its defaults.

    A key given with no value clears the mapping: `scalar_annotations:` alone
    turns off `@Id`.
    """
    if key not in data:
        return dict(defaults)
    return {**defaults, **data[key]} if data[key] else {}


def load_for_workspace(root: str) -> Config:
    """Load the config file at the workspace root, falling back to the user config."""
    path = utils.join(root, WORKSPACE_CONFIG_NAME)
    if utils.exists(path):
        return load(path)
    return load()


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    utils.ensure_dir(utils.dirname(path))

    example = {
        "schema_file_name": "schema.graphql",
        "scalar_mappings": {
            "Int": "Integer",
            "ID": "String",
            "Float": "Double",
        },
        "scalar_annotations": {
            "ID": "@Id",
        },
        "non_null_annotation": "@NonNull",
        "name_annotation": "@Name",
        "list_type": "List",
        "log_level": "WARNING",
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
    return path
