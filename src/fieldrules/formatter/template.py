"""Token substitution for message templates.

Templates contain ``{name}`` placeholders.  Names present in the token
map are replaced with ``str(value)``; unknown placeholders are left as
they are so a missing option never raises while rendering an error.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


def insert(
    template: str,
    tokens: Mapping[str, Any],
    before: str = "{",
    after: str = "}",
) -> str:
    """Substitute ``tokens`` into ``template``.

    Parameters
    ----------
    template:
        The text containing placeholders.
    tokens:
        Placeholder name to value.  Numeric names such as ``"0"`` are
        ordinary keys.
    before, after:
        The placeholder delimiters.

    Returns
    -------
    str
        The rendered text.

    Example
    -------
    ::

        >>> insert("{title} must be at least {0}", {"title": "Age", "0": 18})
        'Age must be at least 18'
    """
    pattern = re.compile(re.escape(before) + r"(\w+)" + re.escape(after))

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in tokens:
            return str(tokens[name])
        return match.group(0)

    return pattern.sub(_replace, template)
