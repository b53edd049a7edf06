"""fieldrules validator module.

Exports the ``Validator`` executor, the ``StandardValidator`` preloaded
with built-in constraints, and the ``validate`` convenience function.
"""
from __future__ import annotations

from fieldrules.validator.validator import StandardValidator, Validator, validate

__all__ = ["Validator", "StandardValidator", "validate"]
