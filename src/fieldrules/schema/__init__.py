"""Schema registry and the value types it stores."""
from __future__ import annotations

from fieldrules.schema.registry import SchemaRegistry
from fieldrules.schema.types import Constraint, Rule

__all__ = ["SchemaRegistry", "Constraint", "Rule"]
