"""Render the error message for a failed rule."""
from __future__ import annotations

from typing import TYPE_CHECKING

from fieldrules.errors import MissingMessageError
from fieldrules.formatter.template import insert

if TYPE_CHECKING:
    from fieldrules.schema.registry import SchemaRegistry
    from fieldrules.schema.types import Rule


def format_message(registry: SchemaRegistry, field: str, rule: Rule) -> str:
    """Build the error string for ``rule`` failing on ``field``.

    The rule's own message wins; otherwise the registry's default for the
    rule name is used.  Available tokens are ``{field}``, ``{title}``, one
    ``{N}`` per option and ``{options}`` for every option at once.  List
    and tuple options are joined with ``", "``.

    Raises
    ------
    MissingMessageError
        If neither the rule nor the registry provides a message.
    """
    message = rule.message or registry.messages.get(rule.rule)

    if not message:
        raise MissingMessageError(rule.rule)

    tokens: dict[str, object] = {
        "field": field,
        "title": registry.fields.get(field, field),
    }

    rendered = []
    for index, option in enumerate(rule.options):
        if isinstance(option, (list, tuple)):
            option = ", ".join(str(item) for item in option)
        tokens[str(index)] = option
        rendered.append(str(option))
    tokens["options"] = ", ".join(rendered)

    return insert(message, tokens)
