"""
validata: normalize heterogeneous input values and check them against
declarative, per-field rule-sets.
"""
from validata.models import NormalizedValue, RuleResult, TypeTag, ValidationResult
from validata.validators import (
    RuleBuilder, RuleNotFound, RuleRegistry, RuleSpec, Schema, SchemaError,
    Validator, build_rule_set, default_registry, is_empty, normalize_value,
    render_message, size_of, validate,
)
from validata.config import load_schema
from validata.logging_config import get_logger, setup_logging

normalize = normalize_value

# Built-in rules for quick use: R.required("..."), R.max(10, "...")
R = RuleBuilder(default_registry())

__version__ = "1.0.0"

__all__ = [
    "NormalizedValue", "RuleResult", "TypeTag", "ValidationResult",
    "RuleBuilder", "RuleNotFound", "RuleRegistry", "RuleSpec", "Schema", "SchemaError",
    "Validator", "build_rule_set", "default_registry", "is_empty", "normalize",
    "normalize_value", "render_message", "size_of", "validate",
    "load_schema", "get_logger", "setup_logging", "R",
]
