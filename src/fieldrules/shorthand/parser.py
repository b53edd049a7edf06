"""Parser for compact rule strings.

Grammar
-------
::

    rule
    rule:option
    rule:option1,option2,...
    rule:option1,option2:Message text, which may itself contain ':'
    rule::Message with no options

Only the first two ``:`` characters are delimiters.  Options are always
strings; constraints coerce them as needed.
"""
from __future__ import annotations

from fieldrules.schema.types import Rule


def split_shorthand(shorthand: str) -> Rule:
    """Split one shorthand rule string into a :class:`Rule`.

    Parameters
    ----------
    shorthand:
        Text such as ``"minLength:5"`` or ``"between:1,10:Out of range"``.

    Returns
    -------
    Rule
        The rule name, message (empty if absent) and option tuple.
    """
    if ":" not in shorthand:
        return Rule(rule=shorthand)

    parts = shorthand.split(":", 2)
    name = parts[0]
    options: tuple[str, ...] = ()
    message = ""

    if len(parts) > 1:
        raw = parts[1]
        if "," in raw:
            options = tuple(raw.split(","))
        elif raw:
            options = (raw,)

    if len(parts) > 2:
        message = parts[2]

    return Rule(rule=name, message=message, options=options)
