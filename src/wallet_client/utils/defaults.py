"""Compiled-in defaults for the wallet client.

The command line is the only runtime configuration surface; everything
it does not override comes from here.
"""

from __future__ import annotations

PROGRAM_NAME: str = "wallet"
"""Program identity used as the prefix of every diagnostic."""

DEFAULT_COMMAND_TYPE: str = "wallet"
"""First element of the command vector unless ``-c`` overrides it."""

DEFAULT_SERVER: str = "wallet.example.com"
"""Wallet server hostname unless ``-s`` overrides it."""

DEFAULT_PORT: int = 4444
"""Wallet server port unless ``-p`` overrides it."""

MIN_PORT: int = 1
MAX_PORT: int = 65535

MIN_WORDS: int = 3
"""Minimum positional shape: ``<command> <type> <name>``."""

OUTPUT_FILE_MODE: int = 0o600
"""Permissions for a newly created ``-f`` output file (owner read-write)."""
