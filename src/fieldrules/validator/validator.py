"""Validation executor: run a data set through the registered rules.

The ``Validator`` extends :class:`~fieldrules.schema.SchemaRegistry` with
``validate``.  Each field present in the data set is checked against its
rules in registration order, and every failing rule writes its rendered
message into ``errors`` under the field key.  Only the last failing
rule's message survives for a field.

Usage
-----
::

    from fieldrules.validator import Validator

    validator = (
        Validator()
        .add_constraint("min", lambda value, limit: value >= int(limit))
        .add_messages({"min": "{title} must be at least {0}"})
        .add_field("age", "Age", {"min": 18})
    )

    if not validator.validate({"age": 15}):
        print(validator.errors["age"])  # Age must be at least 18

Fields missing from the data set are not checked, even if they carry a
"required" style rule.  Call :meth:`Validator.reset` before reusing a
validator for another data set; errors otherwise carry over.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldrules.constraints.builtin import DEFAULT_MESSAGES, BuiltinConstraints
from fieldrules.errors import MissingConstraintError
from fieldrules.formatter.messages import format_message
from fieldrules.schema.registry import SchemaRegistry
from fieldrules.schema.types import Rule
from fieldrules.shorthand.compiler import compile_shorthand

logger = logging.getLogger(__name__)


class Validator(SchemaRegistry):
    """A schema registry that can validate data against its rules.

    Parameters
    ----------
    data:
        Optional initial data set.
    """

    def validate(self, data: Mapping[str, Any] | None = None) -> bool:
        """Check the data set and return ``True`` if no errors were recorded.

        Parameters
        ----------
        data:
            If non-empty, replaces the current data set.  If empty and
            the current data set is empty too, ``False`` is returned
            immediately without touching ``errors``.

        Returns
        -------
        bool
            ``True`` when ``errors`` is empty after checking.

        Raises
        ------
        MissingConstraintError
            If a rule names a constraint that was never registered.
        MissingMessageError
            If a failing rule has no message to render.
        """
        if data:
            self.set_data(data)
        elif not self._data:
            logger.debug("Nothing to validate: data set is empty")
            return False

        for field, value in self._data.items():
            rules = self._rules.get(field)
            if not rules:
                continue

            for name, rule in rules.items():
                constraint = self._constraints.get(name)
                if constraint is None:
                    raise MissingConstraintError(name)

                # Value goes first, then the rule options
                if not constraint(value, *rule.options):
                    logger.debug("Field %r failed rule %r", field, name)
                    self.add_error(field, self.format_message(field, rule))

        return not self._errors

    def format_message(self, field: str, rule: Rule) -> str:
        """Render the error message for ``rule`` failing on ``field``."""
        return format_message(self, field, rule)

    @classmethod
    def from_shorthand(
        cls,
        data: Mapping[str, Any] | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> Validator:
        """Build an instance of this class from shorthand field descriptors.

        See :func:`fieldrules.shorthand.compile_shorthand`.
        """
        return compile_shorthand(data, fields, factory=cls)


class StandardValidator(Validator):
    """A ``Validator`` preloaded with the built-in constraints and messages."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        super().__init__(data)
        self.add_constraints_from(BuiltinConstraints())
        self.add_messages(DEFAULT_MESSAGES)


def validate(
    data: Mapping[str, Any],
    fields: Mapping[str, Any],
) -> tuple[bool, dict[str, str]]:
    """Convenience function: validate ``data`` against shorthand ``fields``.

    Uses :class:`StandardValidator`, so only built-in constraints are
    available.

    Returns
    -------
    tuple[bool, dict[str, str]]
        The pass/fail result and a copy of the error mapping.
    """
    validator = StandardValidator.from_shorthand(data, fields)
    passed = validator.validate()
    return passed, dict(validator.errors)
