#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/options/base.py
"""Shared behavior of the editor and serializer option dataclasses.

Options are frozen: an editor or serializer keeps the instance it was built
with, and changes go through :meth:`CloneFrozenMixin.create_updated`, which
re-runs ``__post_init__`` validation on the copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes and field documentation for frozen options."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a validated copy with the given fields replaced.

        Raises
        ------
        TypeError
            If a keyword is not a field of this options class
        ValueError
            If the new values fail validation

        """
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls) -> dict[str, str]:
        """Map each documented field to its ``help`` metadata, in declaration order."""
        return {f.name: f.metadata["help"] for f in fields(cls) if "help" in f.metadata}
