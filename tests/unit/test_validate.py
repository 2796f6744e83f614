"""
Unit tests for the validation engine and the Validator object.
"""
import io

import pytest

from validata import R as default_R, validate
from validata.models import RuleResult, ValidationResult
from validata.validators.registry import RuleNotFound


def test_missing_required_field():
    result = validate({}, {"email": [default_R.required("Email is required")]})
    assert result == ValidationResult(valid=False, errors={"email": "Email is required"})


def test_max_passes_within_limit(R):
    rules = {"firstName": [R.max(10, "Too long, must be :max characters or less")]}
    result = validate({"firstName": "James"}, rules)
    assert result.valid
    assert result.errors == {}


def test_max_fails_with_substituted_message(R):
    rules = {"firstName": [R.max(10, "Too long, must be :max characters or less")]}
    result = validate({"firstName": "abcdefghijk"}, rules)
    assert not result.valid
    assert result.errors == {"firstName": "Too long, must be 10 characters or less"}


def test_number_size_is_its_value(R):
    assert validate({"age": 5}, {"age": [R.between([1, 10], "Out of range")]}).valid
    assert validate({"age": 15}, {"age": [R.between([1, 10], "Out of range")]}).errors == {
        "age": "Out of range"
    }


def test_optional_size_rule_on_missing_field(R):
    assert validate({}, {"nickname": [R.max(5, "too long")]}).valid


def test_required_message_survives_auto_passing_rule(R):
    result = validate({}, {"nickname": [R.required("required"), R.max(5, "too long")]})
    assert not result.valid
    assert result.errors == {"nickname": "required"}


def test_last_failing_rule_wins(R):
    rules = {"code": [R.min(5, "too short"), R.format(r"^\d+$", "digits only")]}
    result = validate({"code": "ab"}, rules)
    assert result.errors == {"code": "digits only"}


def test_all_rules_run_after_failure(R):
    calls = []

    def spy(nv):
        calls.append(nv.value)
        return RuleResult(True, "")

    validate({}, {"name": [R.required("required"), spy, spy]})
    assert calls == [None, None]


def test_undeclared_fields_are_ignored(R):
    result = validate({"extra": "", "name": "Ann"}, {"name": [R.required("required")]})
    assert result.valid


def test_each_field_reported_separately(signup_rules):
    result = validate({"email": "nope", "first_name": "Bartholomew", "age": 3}, signup_rules)
    assert not result.valid
    assert result.errors == {
        "email": "Email is not valid",
        "first_name": "Too long, must be 10 characters or less",
    }


def test_custom_rule_error_propagates():
    def broken(nv):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        validate({"a": 1}, {"a": [broken]})


def test_result_serializes():
    result = validate({}, {"email": [default_R.required("Email is required")]})
    assert result.model_dump() == {"valid": False, "errors": {"email": "Email is required"}}


def test_unknown_rule_via_builder(R):
    with pytest.raises(RuleNotFound):
        validate({}, {"zip": [R.postcodeFR("bad")]})


# ── Validator object ───────────────────────────────────────────────────────────

def test_validator_resolves_declarative_entries(validator):
    rules = {
        "email": ["required", {"email": "Email is not valid"}],
        "first_name": [{"max": 10, "message": "Too long, must be :max characters or less"}],
        "age": ["between:[1, 10]"],
    }
    result = validator.validate({"email": "jane@example.com", "first_name": "Bartholomew", "age": 30}, rules)
    assert result.errors == {
        "first_name": "Too long, must be 10 characters or less",
        "age": "Must be between 1 and 10",
    }


def test_validator_mixes_evaluators_and_entries(validator, R):
    result = validator.validate({}, {"email": [R.required("Email is required"), "email"]})
    assert result.errors == {"email": "Email is required"}


def test_unknown_rule_raised_before_any_evaluation(validator):
    calls = []

    def spy(nv):
        calls.append(nv)
        return RuleResult(True, "")

    with pytest.raises(RuleNotFound):
        validator.validate({"a": "x", "b": "y"}, {"a": [spy], "b": ["postcodeFR"]})
    assert calls == []


def test_register_custom_rule(validator):
    def no_spaces(message=None):
        return lambda nv: RuleResult(" " not in str(nv.value), message or "No spaces")

    validator.register_rule("noSpaces", no_spaces)
    rules = {"username": [validator.rules.noSpaces(), "required"]}
    assert validator.validate({"username": "jane doe"}, rules).errors == {"username": "No spaces"}
    assert validator.validate({"username": "jane"}, rules).valid


def test_custom_rules_do_not_leak_between_validators(validator):
    from validata import Validator

    validator.register_rule("noSpaces", lambda message=None: None)
    with pytest.raises(RuleNotFound):
        Validator().build_rule("noSpaces")


def test_build_rule(validator):
    rule = validator.build_rule("min", 2, message="At least :min")
    assert rule(validator.normalize("a")).message == "At least 2"


def test_validator_file_check(R):
    from validata import Validator
    from validata.validators.normalizers import no_files

    plain = Validator(is_file=no_files)
    assert plain.normalize(b"abc").type == "object"
    assert Validator().normalize(b"abc").type == "file"
    assert Validator().validate({"upload": b"abc"}, {"upload": [R.max(2, "too big")]}).errors == {
        "upload": "too big"
    }


def test_closed_upload_does_not_raise(R):
    buf = io.BytesIO(b"abc")
    buf.close()
    assert validate({"f": buf}, {"f": [R.max(10, "too big")]}).valid
    assert validate({"f": buf}, {"f": [R.required("required")]}).errors == {"f": "required"}
