"""Constraint providers.

The provider module defines the ``ConstraintProvider`` base class and the
entry-point backed ``providers`` registry.  Third-party constraint sets
register under the "fieldrules.constraints" entry-point group.
"""
from __future__ import annotations

from fieldrules.constraints.builtin import DEFAULT_MESSAGES, BuiltinConstraints
from fieldrules.constraints.provider import (
    ConstraintProvider,
    ProviderAlreadyRegisteredError,
    ProviderNotFoundError,
    ProviderRegistry,
    providers,
)

__all__ = [
    "BuiltinConstraints",
    "ConstraintProvider",
    "DEFAULT_MESSAGES",
    "ProviderAlreadyRegisteredError",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "providers",
]
