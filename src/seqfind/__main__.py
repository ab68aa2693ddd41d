"""Allow ``python -m seqfind`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m seqfind`` behaves identically to the ``seqfind``
console script.
"""

from __future__ import annotations

from seqfind.cli.app import cli

if __name__ == "__main__":
    cli()
