"""
Declarative rule entries.
Lets a rule-set be written as data ("required", "max:10",
{"between": [1, 10], "message": "..."}) and resolved against a registry.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from validata.validators.registry import RuleRegistry

# Rules whose only argument is the message
MESSAGE_ONLY_RULES = frozenset({
    "required", "email", "mobileUK", "mobileUS", "postcodeUK", "postcodeUS",
})
# Rules whose "name:arg" argument is taken verbatim rather than parsed as YAML
RAW_ARG_RULES = frozenset({"format"})


class SchemaError(ValueError):
    pass


@dataclass(frozen=True)
class RuleSpec:
    name: str
    config: Any = None
    message: Optional[str] = None
    has_config: bool = False

    def build(self, registry: RuleRegistry):
        if self.has_config:
            return registry.build(self.name, self.config, message=self.message)
        return registry.build(self.name, message=self.message)


@dataclass(frozen=True)
class Schema:
    """Read-only: fields is a mapping proxy of field name -> tuple of RuleSpecs."""

    name: str
    fields: Mapping[str, tuple[RuleSpec, ...]] = field(default_factory=dict)

    def __post_init__(self):
        frozen = {fname: tuple(specs) for fname, specs in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(frozen))


def _parse_arg(raw: str) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SchemaError(f"Cannot parse rule argument: {raw!r}") from e


def parse_rule_spec(entry: Any) -> RuleSpec:
    """
    Accepts "name", "name:arg" or {name: config, message: ...}.
    For message-only rules a string config is taken as the message.
    """
    if isinstance(entry, RuleSpec):
        return entry

    if isinstance(entry, str):
        name, sep, raw_arg = entry.partition(":")
        name = name.strip()
        if not name:
            raise SchemaError(f"Empty rule name in {entry!r}")
        if not sep:
            return RuleSpec(name=name)
        if name in MESSAGE_ONLY_RULES:
            return RuleSpec(name=name, message=raw_arg.strip())
        if name in RAW_ARG_RULES:
            return RuleSpec(name=name, config=raw_arg, has_config=True)
        return RuleSpec(name=name, config=_parse_arg(raw_arg), has_config=True)

    if isinstance(entry, Mapping):
        data = dict(entry)
        message = data.pop("message", None)
        if len(data) != 1:
            raise SchemaError(f"Rule entry must name exactly one rule: {entry!r}")
        name, config = next(iter(data.items()))
        if name in MESSAGE_ONLY_RULES or config is None:
            if config is not None and not isinstance(config, str):
                raise SchemaError(f"Rule {name!r} takes only a message, got {config!r}")
            return RuleSpec(name=name, message=message or config)
        return RuleSpec(name=name, config=config, message=message, has_config=True)

    raise SchemaError(f"Unsupported rule entry: {entry!r}")


def parse_schema(raw: Any, name: str = "") -> Schema:
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema {name!r} must be a mapping")

    fields = {}
    for fname, entries in (raw.get("fields") or {}).items():
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise SchemaError(f"Rules for field {fname!r} must be a list")
        fields[fname] = [parse_rule_spec(e) for e in entries]

    return Schema(name=raw.get("name", name), fields=fields)


def build_rule_set(rules: Any, registry: RuleRegistry) -> dict[str, list]:
    """
    Resolve a Schema, or a mapping of field -> entries, into evaluators.
    Entries that are already callables are kept as they are. Every rule is
    built before anything is evaluated, so an unknown name fails fast.
    """
    if isinstance(rules, Schema):
        rules = rules.fields

    rule_set = {}
    for fname, entries in rules.items():
        built = []
        for entry in entries:
            if callable(entry):
                built.append(entry)
            else:
                built.append(parse_rule_spec(entry).build(registry))
        rule_set[fname] = built
    return rule_set
