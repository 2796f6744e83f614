"""
Validation engine.
For each declared field: normalize the raw value once, run every rule in
declaration order, and keep the message of the last failing rule.
"""
from typing import Any, Mapping, Optional, Sequence

from validata.logging_config import get_logger
from validata.models import Evaluator, NormalizedValue, ValidationResult
from validata.validators.normalizers import FileCheck, default_file_check, normalize_value
from validata.validators.registry import (
    RuleBuilder, RuleFactory, RuleRegistry, default_registry,
)
from validata.validators.specs import build_rule_set

logger = get_logger("validata.validators")


def validate(
    data: Mapping[str, Any],
    rules: Mapping[str, Sequence[Evaluator]],
    is_file: Optional[FileCheck] = None,
) -> ValidationResult:
    """
    Fields missing from `rules` are never checked; fields missing from `data`
    are validated as None. No short-circuit: all rules of a field run, and
    exceptions raised by a rule propagate.
    """
    if is_file is None:
        is_file = default_file_check()

    errors: dict[str, str] = {}
    valid = True
    for fname, field_rules in rules.items():
        normalized = normalize_value(data.get(fname), is_file)
        for rule in field_rules:
            result = rule(normalized)
            if not result.passed:
                valid = False
                errors[fname] = result.message

    logger.debug("validation_complete", fields=len(rules), valid=valid, error_count=len(errors))
    return ValidationResult(valid=valid, errors=errors)


class Validator:
    """
    Owns a rule registry and the file capability check used when normalizing.
    Rule-sets passed to validate() may mix evaluators with declarative entries
    ("required", "max:10", {"between": [1, 10]}); these are resolved against
    this validator's registry before any field is evaluated.
    """

    def __init__(self, registry: Optional[RuleRegistry] = None,
                 is_file: Optional[FileCheck] = None):
        self.registry = registry if registry is not None else default_registry()
        self.is_file = is_file if is_file is not None else default_file_check()
        self.rules = RuleBuilder(self.registry)

    def register_rule(self, name: str, factory: RuleFactory) -> None:
        self.registry.add(name, factory)

    def build_rule(self, name: str, *args, **kwargs) -> Evaluator:
        return self.registry.build(name, *args, **kwargs)

    def normalize(self, value: Any) -> NormalizedValue:
        return normalize_value(value, self.is_file)

    def validate(self, data: Mapping[str, Any], rules) -> ValidationResult:
        rule_set = build_rule_set(rules, self.registry)
        return validate(data, rule_set, self.is_file)
