"""Runtime configuration read from environment variables.

Environment
-----------
``SEQFIND_RESOURCE_DIR``
    Directory holding ``<name>.<ext>`` resources.  Unset means the
    resources bundled in :mod:`seqfind.data`.
``SEQFIND_RESOURCE_EXT``
    Resource file extension (default ``json``).
``SEQFIND_STRATEGY``
    Default load strategy: ``classified``, ``opaque`` or ``recover``.

CLI flags take precedence over every value here.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from seqfind.exceptions import SeqfindError


class Strategy(str, Enum):
    """Error-propagation strategy used when loading a resource."""

    CLASSIFIED = "classified"
    OPAQUE = "opaque"
    RECOVER = "recover"

    @classmethod
    def parse(cls, value: str) -> Strategy:
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise SeqfindError(
                f"Unknown load strategy: {value!r}",
                hint=f"Choose one of: {choices}",
            ) from None


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for a single CLI invocation."""

    resource_dir: Path | None = None
    resource_ext: str = "json"
    strategy: Strategy = Strategy.CLASSIFIED

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_dir = env.get("SEQFIND_RESOURCE_DIR", "").strip()
        raw_ext = env.get("SEQFIND_RESOURCE_EXT", "").strip().lstrip(".")
        raw_strategy = env.get("SEQFIND_STRATEGY", "").strip()

        return cls(
            resource_dir=Path(raw_dir) if raw_dir else None,
            resource_ext=raw_ext or "json",
            strategy=Strategy.parse(raw_strategy) if raw_strategy else Strategy.CLASSIFIED,
        )

    def with_overrides(
        self,
        *,
        resource_dir: str | None = None,
        strategy: str | None = None,
    ) -> Settings:
        """Return a copy with CLI-provided values applied."""
        updated = self
        if resource_dir:
            updated = replace(updated, resource_dir=Path(resource_dir))
        if strategy:
            updated = replace(updated, strategy=Strategy.parse(strategy))
        return updated
