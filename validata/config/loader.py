"""
YAML schema loader. One YAML per schema, shared between whoever produces the
data and whoever enforces it.

    name: contact
    fields:
      email:
        - required: "Email is required"
        - email
      first_name:
        - max: 10
          message: "Too long, must be :max characters or less"
      age:
        - "between:[1, 120]"
"""
import os
from functools import lru_cache

import yaml

from validata.logging_config import get_logger
from validata.settings import get_settings
from validata.validators.specs import Schema, SchemaError, parse_schema

logger = get_logger("validata.config")


def _resolve_path(name_or_path: str) -> str:
    if os.path.sep in name_or_path or name_or_path.endswith((".yaml", ".yml")):
        return name_or_path
    return os.path.join(get_settings().schema_dir, f"{name_or_path}.yaml")


@lru_cache(maxsize=32)
def _load_schema_file(config_path: str) -> Schema:
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"No schema found at {config_path}")

    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaError(f"Invalid YAML in {config_path}") from e

    default_name = os.path.splitext(os.path.basename(config_path))[0]
    schema = parse_schema(raw, default_name)
    logger.info("schema_loaded", schema=schema.name, fields=len(schema.fields))
    return schema


def load_schema(name_or_path: str) -> Schema:
    """Load a schema by bare name (looked up in schema_dir) or by file path."""
    return _load_schema_file(_resolve_path(name_or_path))
