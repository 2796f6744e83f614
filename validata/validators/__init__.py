from validata.validators.normalizers import normalize_value, size_of, is_empty, is_file_like
from validata.validators.messages import render_message
from validata.validators.registry import RuleRegistry, RuleNotFound, RuleBuilder, default_registry
from validata.validators.specs import RuleSpec, Schema, SchemaError, parse_rule_spec, build_rule_set
from validata.validators.engine import validate, Validator

__all__ = [
    "normalize_value", "size_of", "is_empty", "is_file_like",
    "render_message",
    "RuleRegistry", "RuleNotFound", "RuleBuilder", "default_registry",
    "RuleSpec", "Schema", "SchemaError", "parse_rule_spec", "build_rule_set",
    "validate", "Validator",
]
