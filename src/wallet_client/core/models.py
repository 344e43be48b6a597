"""Domain models for wallet-client.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and invariant checks.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from wallet_client.utils.defaults import (
    DEFAULT_COMMAND_TYPE,
    DEFAULT_PORT,
    DEFAULT_SERVER,
    MAX_PORT,
    MIN_PORT,
    MIN_WORDS,
)

CommandVector = tuple[str, ...]
"""Ordered command sent to the server: command type followed by the words."""


# ---------------------------------------------------------------------------
# Invocation request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """A validated, normalized command line.

    Built by :func:`~wallet_client.core.resolver.resolve_request`; the
    checks in ``__post_init__`` repeat the resolver's invariants so a
    request assembled by hand cannot be inconsistent either.
    """

    words: tuple[str, ...]
    """Positional arguments, e.g. ``("get", "keytab", "host/example.com")``."""

    command_type: str = DEFAULT_COMMAND_TYPE
    """First element of the command vector (``-c``)."""

    server: str = DEFAULT_SERVER
    """Wallet server hostname (``-s``)."""

    port: int = DEFAULT_PORT
    """Wallet server port (``-p``)."""

    principal: str | None = None
    """Server principal (``-k``); ``None`` lets the transport choose."""

    output_file: str | None = None
    """Target file for ``get`` output (``-f``)."""

    derived_file: str | None = None
    """Srvtab file derived from a fetched keytab (``-S``)."""

    def __post_init__(self) -> None:
        if len(self.words) < MIN_WORDS:
            raise ValueError(f"at least {MIN_WORDS} words are required")
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise ValueError(f"port {self.port} out of range")
        if self.output_file is not None and self.words[0] != "get":
            raise ValueError("output_file requires a get command")
        if self.derived_file is not None:
            if self.output_file is None:
                raise ValueError("derived_file requires output_file")
            if self.words[1] != "keytab":
                raise ValueError("derived_file requires a get keytab command")

    @property
    def is_get(self) -> bool:
        return self.words[0] == "get"

    @property
    def object_name(self) -> str:
        """The ``<name>`` argument (third word), passed to the srvtab writer."""
        return self.words[2]


# ---------------------------------------------------------------------------
# Invocation result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Outcome of one remote command as reported by the transport."""

    status: int
    """Remote exit status; becomes the process exit code."""

    stdout: bytes = b""
    """Payload bytes, possibly binary (a keytab, for example)."""

    stderr: bytes = b""
    """Diagnostic bytes produced by the remote command."""

    error: str | None = None
    """Protocol or server-level failure message, if any."""


# ---------------------------------------------------------------------------
# Output routing
# ---------------------------------------------------------------------------

class OutputRoute(enum.Enum):
    """Where the Dispatcher sends an :class:`InvocationResult`.

    Members are listed in precedence order; exactly one applies.
    """

    ERROR = "error"
    """``result.error`` is set: report it on stderr."""

    DIAGNOSTIC = "diagnostic"
    """Remote stderr is non-empty: copy it to stderr."""

    FILE = "file"
    """``get`` with ``-f``: write the payload to the output file."""

    STDOUT = "stdout"
    """Everything else: copy the payload to standard output."""
