"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations. It should import only from the public
sub-packages of ``fieldrules``, never from private helpers.
"""
from __future__ import annotations
