"""Message formatting: template substitution and per-rule error rendering."""
from __future__ import annotations

from fieldrules.formatter.messages import format_message
from fieldrules.formatter.template import insert

__all__ = ["format_message", "insert"]
