"""Unit tests for fieldrules.validator.validator: the validation executor,
``StandardValidator`` and the ``validate`` convenience function.
"""
from __future__ import annotations

import logging

import pytest

from fieldrules.errors import MissingConstraintError, MissingMessageError
from fieldrules.validator import StandardValidator, Validator, validate


def _recording_validator(calls: list[tuple[object, ...]]) -> Validator:
    def record(value: object, *options: object) -> bool:
        calls.append((value, *options))
        return True

    return Validator().add_constraint("record", record)


# ===========================================================================
# End-to-end behaviour
# ===========================================================================


class TestEndToEnd:
    def test_failing_value(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 15}) is False
        assert dict(age_validator.errors) == {"age": "Age must be at least 18"}

    def test_passing_value(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 20}) is True
        assert dict(age_validator.errors) == {}

    def test_boundary_value_passes(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 18}) is True


# ===========================================================================
# Data handling
# ===========================================================================


class TestDataHandling:
    def test_empty_call_on_empty_data_returns_false_without_errors(self) -> None:
        validator = Validator().add_constraint("x", lambda v: False)
        assert validator.validate({}) is False
        assert dict(validator.errors) == {}

    def test_none_call_on_empty_data_returns_false(self) -> None:
        assert Validator().validate() is False

    def test_empty_call_uses_existing_data(self, age_validator: Validator) -> None:
        age_validator.set_data({"age": 10})
        assert age_validator.validate() is False
        assert "age" in age_validator.errors

    def test_constructor_data_is_validated(self) -> None:
        validator = StandardValidator({"name": ""}).add_field("name", "Name", {"notEmpty": []})
        assert validator.validate() is False
        assert validator.errors["name"] == "Name is required"

    def test_non_empty_call_replaces_data(self, age_validator: Validator) -> None:
        age_validator.set_data({"age": 10})
        assert age_validator.validate({"age": 30}) is True
        assert dict(age_validator.data) == {"age": 30}

    def test_fields_without_rules_are_skipped(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 30, "nickname": None}) is True

    def test_fields_missing_from_data_are_not_checked(self) -> None:
        validator = StandardValidator().add_field("name", "Name", {"notEmpty": []})
        validator.add_field("age", "Age", {"min": ["18"]})
        assert validator.validate({"age": 21}) is True
        assert "name" not in validator.errors

    def test_reset_allows_reuse(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 15}) is False
        age_validator.reset()
        assert age_validator.validate({"age": 40}) is True

    def test_errors_carry_over_without_reset(self, age_validator: Validator) -> None:
        assert age_validator.validate({"age": 15}) is False
        assert age_validator.validate({"age": 40}) is False
        assert "age" in age_validator.errors

    def test_fields_checked_in_data_order(self) -> None:
        calls: list[tuple[object, ...]] = []
        validator = _recording_validator(calls)
        validator.add_field("a", "A", {"record": []}).add_field("b", "B", {"record": []})
        validator.validate({"b": 2, "a": 1})
        assert calls == [(2,), (1,)]


# ===========================================================================
# Constraint invocation
# ===========================================================================


class TestConstraintInvocation:
    def test_value_is_first_then_options(self) -> None:
        calls: list[tuple[object, ...]] = []
        validator = _recording_validator(calls)
        validator.add_field("f", "F").add_rule("f", "record", "", ["1", "10"])
        validator.validate({"f": "v"})
        assert calls == [("v", "1", "10")]

    def test_falsy_return_is_failure(self) -> None:
        validator = (
            Validator()
            .add_constraint("zero", lambda value: 0)
            .add_field("f", "F")
            .add_rule("f", "zero", "{title} failed")
        )
        assert validator.validate({"f": 1}) is False
        assert validator.errors["f"] == "F failed"

    def test_truthy_non_bool_return_is_success(self) -> None:
        validator = (
            Validator()
            .add_constraint("match", lambda value: "yes")
            .add_field("f", "F")
            .add_rule("f", "match", "never")
        )
        assert validator.validate({"f": 1}) is True

    def test_passing_rule_leaves_no_error(self) -> None:
        validator = StandardValidator().add_field("n", "N", {"numeric": [], "min": ["1"]})
        assert validator.validate({"n": "5"}) is True
        assert "n" not in validator.errors

    def test_last_failing_rule_message_wins(self) -> None:
        validator = (
            Validator()
            .add_constraint("no", lambda value: False)
            .add_constraint("nope", lambda value: False)
            .add_field("f", "F")
            .add_rule("f", "no", "first")
            .add_rule("f", "nope", "second")
        )
        assert validator.validate({"f": 1}) is False
        assert dict(validator.errors) == {"f": "second"}

    def test_earlier_failure_kept_when_later_rule_passes(self) -> None:
        validator = (
            Validator()
            .add_constraint("no", lambda value: False)
            .add_constraint("yes", lambda value: True)
            .add_field("f", "F")
            .add_rule("f", "no", "first")
            .add_rule("f", "yes", "second")
        )
        validator.validate({"f": 1})
        assert dict(validator.errors) == {"f": "first"}

    def test_failures_are_logged(self, caplog: pytest.LogCaptureFixture, age_validator: Validator) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldrules.validator.validator"):
            age_validator.validate({"age": 1})
        assert "age" in caplog.text


# ===========================================================================
# Configuration errors
# ===========================================================================


class TestConfigurationErrors:
    def test_missing_constraint_raises(self) -> None:
        validator = Validator().add_field("f", "F").add_rule("f", "ghost", "msg")
        with pytest.raises(MissingConstraintError) as exc_info:
            validator.validate({"f": 1})
        assert exc_info.value.rule == "ghost"

    def test_missing_constraint_is_not_recorded_as_error(self) -> None:
        validator = Validator().add_field("f", "F").add_rule("f", "ghost", "msg")
        with pytest.raises(MissingConstraintError):
            validator.validate({"f": 1})
        assert dict(validator.errors) == {}

    def test_unresolved_constraint_is_fine_until_exercised(self) -> None:
        validator = Validator().add_field("f", "F").add_rule("f", "ghost", "msg")
        assert validator.validate({"other": 1}) is True

    def test_missing_message_raises_on_failure(self) -> None:
        validator = (
            Validator()
            .add_constraint("no", lambda value: False)
            .add_field("f", "F")
            .add_rule("f", "no")
        )
        with pytest.raises(MissingMessageError):
            validator.validate({"f": 1})

    def test_missing_message_is_harmless_when_rule_passes(self) -> None:
        validator = (
            Validator()
            .add_constraint("yes", lambda value: True)
            .add_field("f", "F")
            .add_rule("f", "yes")
        )
        assert validator.validate({"f": 1}) is True


# ===========================================================================
# StandardValidator and validate()
# ===========================================================================


class TestStandardValidator:
    def test_builtin_constraints_loaded(self) -> None:
        validator = StandardValidator()
        for name in ("notEmpty", "email", "minLength", "between", "inList"):
            assert name in validator.constraints

    def test_default_messages_loaded(self) -> None:
        assert StandardValidator().messages["notEmpty"] == "{title} is required"

    def test_between_message(self) -> None:
        validator = StandardValidator.from_shorthand(
            {"name": "a"}, {"name": {"title": "Name", "rules": "between:2,5"}}
        )
        assert validator.validate() is False
        assert validator.errors["name"] == "Name must be between 2 and 5 characters in length"

    def test_in_list_message_names_every_choice(self) -> None:
        validator = StandardValidator.from_shorthand(
            {"role": "owner"}, {"role": "inList:admin,editor,viewer"}
        )
        assert validator.validate() is False
        assert validator.errors["role"] == (
            "role must be one of the following: admin, editor, viewer"
        )

    def test_in_list_with_list_option_joins_message(self) -> None:
        validator = StandardValidator().add_field("role", "Role")
        validator.add_rule("role", "inList", "", [["admin", "viewer"]])
        assert validator.validate({"role": "owner"}) is False
        assert validator.errors["role"] == "Role must be one of the following: admin, viewer"


class TestValidateFunction:
    def test_passes(self) -> None:
        assert validate({"email": "a@example.com"}, {"email": "email"}) == (True, {})

    def test_fails(self) -> None:
        passed, errors = validate({"email": "nope"}, {"email": "email"})
        assert passed is False
        assert errors == {"email": "email must be a valid email address"}

    def test_empty_data(self) -> None:
        assert validate({}, {"email": "email"}) == (False, {})
