"""Schema registry: the declarative configuration behind a validator.

The ``SchemaRegistry`` holds field titles, per-field rules, named
constraint callbacks and default message templates, together with the
data set under validation and the errors gathered for it.  Every mutator
returns the registry itself so configuration reads as a chain::

    registry = (
        SchemaRegistry()
        .add_constraint("min", lambda value, limit: value >= int(limit))
        .add_messages({"min": "{title} must be at least {0}"})
        .add_field("age", "Age", {"min": [18]})
    )

The registry performs no locking; give each thread its own instance.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from fieldrules.errors import UnknownFieldError
from fieldrules.schema.types import Constraint, ReadOnlyRules, Rule, to_options

if TYPE_CHECKING:
    from fieldrules.constraints.provider import ConstraintProvider

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Mutable container of fields, rules, constraints, messages, data and errors.

    Parameters
    ----------
    data:
        Optional initial data set, keyed by field.  Iteration order of
        this mapping decides the order in which fields are checked.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._constraints: dict[str, Constraint] = {}
        self._data: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._fields: dict[str, str] = {}
        self._messages: dict[str, str] = {}
        self._rules: dict[str, dict[str, Rule]] = {}
        self.set_data(data or {})

    # ------------------------------------------------------------------
    # Constraints
    # ------------------------------------------------------------------

    def add_constraint(self, name: str, callback: Constraint) -> SchemaRegistry:
        """Register ``callback`` under ``name``, replacing any previous one."""
        self._constraints[name] = callback
        logger.debug("Registered constraint %r", name)
        return self

    def add_constraints_from(self, provider: ConstraintProvider) -> SchemaRegistry:
        """Merge every constraint exposed by ``provider``.

        Names already present are overwritten by the provider's entries.
        """
        constraints = provider.get_constraints()
        self._constraints.update(constraints)
        logger.debug(
            "Merged %d constraint(s) from %s",
            len(constraints),
            type(provider).__qualname__,
        )
        return self

    # ------------------------------------------------------------------
    # Fields, rules and messages
    # ------------------------------------------------------------------

    def add_field(
        self,
        field: str,
        title: str,
        rules: Mapping[str, Any] | None = None,
    ) -> SchemaRegistry:
        """Register ``field`` with a human-readable ``title``.

        Parameters
        ----------
        field:
            The key the field's value will have in the data set.
        title:
            Display name, available to messages as ``{title}``.
        rules:
            Optional ``rule name -> options`` mapping.  Each entry is
            added with :meth:`add_rule` and an empty message.
        """
        self._fields[field] = title
        logger.debug("Registered field %r (%r)", field, title)

        for rule, options in (rules or {}).items():
            self.add_rule(field, rule, "", options)

        return self

    def add_messages(self, messages: Mapping[str, str]) -> SchemaRegistry:
        """Merge default message templates keyed by rule name."""
        self._messages.update(messages)
        return self

    def add_rule(
        self,
        field: str,
        rule: str,
        message: str = "",
        options: Any = (),
    ) -> SchemaRegistry:
        """Attach ``rule`` to an existing ``field``.

        The first rule ever added under a given name sets that name's
        default message, even when ``message`` is empty.  Later rules
        with an empty ``message`` inherit the default; rules with their
        own message keep it and leave the default alone.  A rule with
        the same name already on ``field`` is replaced.

        Raises
        ------
        UnknownFieldError
            If ``field`` has not been added.  The registry is left
            untouched.
        """
        if field not in self._fields:
            raise UnknownFieldError(field)

        if rule in self._messages:
            message = message or self._messages[rule]
        else:
            self._messages[rule] = message

        self._rules.setdefault(field, {})[rule] = Rule(
            rule=rule,
            message=message,
            options=to_options(options),
        )
        logger.debug("Attached rule %r to field %r", rule, field)
        return self

    # ------------------------------------------------------------------
    # Data and errors
    # ------------------------------------------------------------------

    def add_error(self, field: str, message: str) -> SchemaRegistry:
        """Record ``message`` for ``field``, replacing any earlier error."""
        self._errors[field] = message
        return self

    def set_data(self, data: Mapping[str, Any]) -> SchemaRegistry:
        """Replace the data set under validation."""
        self._data = dict(data)
        return self

    def reset(self) -> SchemaRegistry:
        """Clear data and errors; fields, rules, constraints and messages stay."""
        self._data.clear()
        self._errors.clear()
        return self

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def constraints(self) -> Mapping[str, Constraint]:
        return MappingProxyType(self._constraints)

    @property
    def data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def fields(self) -> Mapping[str, str]:
        return MappingProxyType(self._fields)

    @property
    def messages(self) -> Mapping[str, str]:
        return MappingProxyType(self._messages)

    @property
    def rules(self) -> Mapping[str, Mapping[str, Rule]]:
        return ReadOnlyRules(self._rules)
