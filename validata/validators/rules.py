"""
Built-in rule factories.
A factory takes its configuration and an optional message template and returns
an evaluator: NormalizedValue -> RuleResult. Every rule except `required` (and
the free-form `test`) passes on empty input, so rules compose with `required`
instead of duplicating it.
"""
import re
from typing import Any, Callable, Optional, Union

from validata.models import Evaluator, NormalizedValue, RuleResult
from validata.validators.messages import render_message, stringify
from validata.validators.normalizers import is_empty, is_present, size_of

Pattern = Union[str, re.Pattern]

# ─── Fixed format patterns ────────────────────────────────────────────────────

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# 07xxx xxx xxx or +44 7xxx xxx xxx, optional single spaces between groups
MOBILE_UK_PATTERN = re.compile(r"^(?:\+44\s?7\d{3}|\(?07\d{3}\)?)\s?\d{3}\s?\d{3}$")
# (555) 555-5555, 555.555.5555, +1 555 555 5555 ...
MOBILE_US_PATTERN = re.compile(r"^(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}$")
POSTCODE_UK_PATTERN = re.compile(r"^[A-Z]{1,2}\d[A-Z\d]?\s*\d[A-Z]{2}$", re.IGNORECASE)
POSTCODE_US_PATTERN = re.compile(r"^\d{5}(?:-\d{4})?$")

DEFAULT_MESSAGES = {
    "required": "This field is required",
    "min": "Must be at least :min",
    "max": "Must be at most :max",
    "between": "Must be between :min and :max",
    "test": "This field is invalid",
    "format": "This field is not in the correct format",
    "email": "Must be a valid email address",
    "mobileUK": "Must be a valid UK mobile number",
    "mobileUS": "Must be a valid US mobile number",
    "postcodeUK": "Must be a valid UK postcode",
    "postcodeUS": "Must be a valid US zip code",
}


def _evaluator(check: Callable[[NormalizedValue], bool], message: str,
               optional: bool = True) -> Evaluator:
    def evaluate(normalized: NormalizedValue) -> RuleResult:
        if optional and is_empty(normalized):
            return RuleResult(True, message)
        return RuleResult(bool(check(normalized)), message)
    return evaluate


# ─── Size rules ───────────────────────────────────────────────────────────────

def required_rule(message: Optional[str] = None) -> Evaluator:
    message = render_message(message or DEFAULT_MESSAGES["required"], {})
    return _evaluator(is_present, message, optional=False)


def min_rule(minimum: float, message: Optional[str] = None) -> Evaluator:
    """Inclusive: passes when size >= minimum."""
    message = render_message(message or DEFAULT_MESSAGES["min"], {"min": minimum})
    return _evaluator(lambda nv: size_of(nv, (minimum, None)), message)


def max_rule(maximum: float, message: Optional[str] = None) -> Evaluator:
    """Inclusive: passes when size <= maximum."""
    message = render_message(message or DEFAULT_MESSAGES["max"], {"max": maximum})
    return _evaluator(lambda nv: size_of(nv, (None, maximum)), message)


def between_rule(bounds, message: Optional[str] = None) -> Evaluator:
    """Inclusive at both ends: passes when lo <= size <= hi."""
    lo, hi = bounds
    message = render_message(message or DEFAULT_MESSAGES["between"], {"min": lo, "max": hi})
    return _evaluator(lambda nv: size_of(nv, (lo, hi)), message)


# ─── Predicate rules ──────────────────────────────────────────────────────────

def predicate_rule(predicate: Callable[[Any], Any], message: Optional[str] = None) -> Evaluator:
    """
    Wrap an arbitrary predicate over the normalized value. Runs on empty input
    too; exceptions raised by the predicate propagate to the caller.
    """
    message = render_message(message or DEFAULT_MESSAGES["test"], {})
    return _evaluator(lambda nv: predicate(nv.value), message, optional=False)


def format_rule(pattern: Pattern, message: Optional[str] = None) -> Evaluator:
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    message = render_message(message or DEFAULT_MESSAGES["format"], {"format": regex.pattern})
    return _evaluator(lambda nv: regex.search(stringify(nv.value)) is not None, message)


def _fixed_format(name: str, pattern: "re.Pattern[str]"):
    def factory(message: Optional[str] = None) -> Evaluator:
        return format_rule(pattern, message or DEFAULT_MESSAGES[name])
    factory.__name__ = f"{name}_rule"
    factory.__doc__ = f"format rule using {pattern.pattern!r}"
    return factory


email_rule = _fixed_format("email", EMAIL_PATTERN)
mobile_uk_rule = _fixed_format("mobileUK", MOBILE_UK_PATTERN)
mobile_us_rule = _fixed_format("mobileUS", MOBILE_US_PATTERN)
postcode_uk_rule = _fixed_format("postcodeUK", POSTCODE_UK_PATTERN)
postcode_us_rule = _fixed_format("postcodeUS", POSTCODE_US_PATTERN)


BUILTIN_RULES = {
    "required": required_rule,
    "min": min_rule,
    "max": max_rule,
    "between": between_rule,
    "test": predicate_rule,
    "format": format_rule,
    "email": email_rule,
    "mobileUK": mobile_uk_rule,
    "mobileUS": mobile_us_rule,
    "postcodeUK": postcode_uk_rule,
    "postcodeUS": postcode_us_rule,
}
