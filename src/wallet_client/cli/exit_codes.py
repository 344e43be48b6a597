"""Exit-code constants used by the CLI layer.

Centralised here so that every local exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  When a
remote call was made, its status is the exit code instead.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — help, version, or nothing to do."""

GENERAL_ERROR: int = 1
"""Usage error or a known WalletError. A diagnostic was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

BROKEN_PIPE: int = 141
"""Standard output closed early by the reader (128 + SIGPIPE=13)."""
