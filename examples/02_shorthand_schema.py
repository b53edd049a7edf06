#!/usr/bin/env python3
"""Example: compiling a shorthand schema

Builds a ``StandardValidator`` from a declarative field map using every
supported descriptor shape, and shows how shorthand strings are parsed.

Usage:
    python examples/02_shorthand_schema.py

Requirements:
    pip install fieldrules
"""
from __future__ import annotations

import fieldrules

SCHEMA = {
    # A pipe-delimited string of rules
    "username": "notEmpty|alphaNumeric|between:3,20",
    # A list of rule strings, one with its own message
    "email": ["notEmpty", "email::Please enter a valid email address"],
    # A mapping with an explicit title
    "role": {"title": "Account role", "rules": "inList:admin,editor,viewer"},
}

SUBMISSION = {
    "username": "jd",
    "email": "jd@example",
    "role": "owner",
    "nickname": "never checked",
}


def main() -> None:
    for shorthand in ("notEmpty", "between:3,20", "email::Please enter a valid email address"):
        print(f"{shorthand!r:50} -> {fieldrules.split_shorthand(shorthand)}")

    print()
    validator = fieldrules.StandardValidator.from_shorthand(SUBMISSION, SCHEMA)
    passed = validator.validate()

    print(f"Passed: {passed}")
    for field, message in validator.errors.items():
        print(f"  {field:10} {message}")


if __name__ == "__main__":
    main()
