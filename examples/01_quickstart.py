#!/usr/bin/env python3
"""Example: fieldrules quickstart

Registers a field, a constraint and a default message by hand, then
validates two data sets against the same schema.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install fieldrules
"""
from __future__ import annotations

import fieldrules


def main() -> None:
    validator = (
        fieldrules.Validator()
        .add_constraint("min", lambda value, limit: value >= int(limit))
        .add_messages({"min": "{title} must be at least {0}"})
        .add_field("age", "Age", {"min": 18})
    )

    print("=" * 60)
    print("Checking age 15")
    print("=" * 60)
    print(f"Passed: {validator.validate({'age': 15})}")
    for field, message in validator.errors.items():
        print(f"  {field}: {message}")

    # Keep the schema, drop the previous data and errors
    validator.reset()

    print()
    print("=" * 60)
    print("Checking age 20")
    print("=" * 60)
    print(f"Passed: {validator.validate({'age': 20})}")
    print(f"Errors: {dict(validator.errors)}")


if __name__ == "__main__":
    main()
