"""Allow ``python -m wallet_client`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m wallet_client`` behaves identically to the ``wallet``
console script.
"""

from __future__ import annotations

from wallet_client.cli.app import cli

if __name__ == "__main__":
    cli()
