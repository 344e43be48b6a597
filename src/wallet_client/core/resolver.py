"""Argument resolution — turn parsed options into an InvocationRequest.

Every function in this module is a **pure** transformation: no I/O, no
process exit.  Violations are raised as typed exceptions and the CLI
layer decides how to render them.

Validation order (enforced by :func:`resolve_request`):

1. **Option shape** — the ``-p`` value must be a port number.
2. **Positional count** — at least ``<command> <type> <name>``.
3. **Cross-flag rules** — ``-f`` only with ``get``; ``-S`` only with
   ``get keytab`` and only together with ``-f``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from wallet_client.core.models import InvocationRequest
from wallet_client.exceptions import InvalidPortError, OptionConflictError, UsageError
from wallet_client.utils.defaults import (
    DEFAULT_COMMAND_TYPE,
    DEFAULT_PORT,
    DEFAULT_SERVER,
    MAX_PORT,
    MIN_PORT,
    MIN_WORDS,
)

# Same acceptance as strtol(value, &end, 10) followed by *end == '\0'.
_PORT_PATTERN = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# 1. Option shape
# ---------------------------------------------------------------------------

def parse_port(value: str) -> int:
    """Parse a ``-p`` argument as a base-10 port in 1–65535.

    Raises
    ------
    InvalidPortError
        For empty, non-numeric, partially numeric or out-of-range input.
    """
    if _PORT_PATTERN.fullmatch(value) is None:
        raise InvalidPortError(value)
    port = int(value)
    if port < MIN_PORT or port > MAX_PORT:
        raise InvalidPortError(value)
    return port


# ---------------------------------------------------------------------------
# 2. Positional count
# ---------------------------------------------------------------------------

def check_word_count(words: Sequence[str]) -> None:
    if len(words) < MIN_WORDS:
        raise UsageError(
            f"expected at least {MIN_WORDS} arguments, got {len(words)}",
        )


# ---------------------------------------------------------------------------
# 3. Cross-flag rules
# ---------------------------------------------------------------------------

def check_output_options(
    words: Sequence[str],
    output_file: str | None,
    derived_file: str | None,
) -> None:
    """Enforce where ``-f`` and ``-S`` may be used.

    Assumes :func:`check_word_count` has already passed.
    """
    if output_file is not None and words[0] != "get":
        raise OptionConflictError("-f only supported for get")
    if derived_file is not None:
        if words[0] != "get" or words[1] != "keytab":
            raise OptionConflictError("-S only supported for get keytab")
        if output_file is None:
            raise OptionConflictError("-S option requires -f also be used")


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def resolve_request(
    words: Sequence[str],
    *,
    command_type: str | None = None,
    server: str | None = None,
    port: str | None = None,
    principal: str | None = None,
    output_file: str | None = None,
    derived_file: str | None = None,
) -> InvocationRequest:
    """Validate raw option values and build the request.

    ``None`` for any option means "not given on the command line" and
    selects the compiled-in default.  *port* is the raw ``-p`` string.

    Raises
    ------
    InvalidPortError
        If *port* is not a valid port number.
    UsageError
        If fewer than three positional words remain.
    OptionConflictError
        If ``-f`` or ``-S`` is used with an unsupported command.
    """
    resolved_port = parse_port(port) if port is not None else DEFAULT_PORT
    check_word_count(words)
    check_output_options(words, output_file, derived_file)

    return InvocationRequest(
        words=tuple(words),
        command_type=command_type if command_type is not None else DEFAULT_COMMAND_TYPE,
        server=server if server is not None else DEFAULT_SERVER,
        port=resolved_port,
        principal=principal,
        output_file=output_file,
        derived_file=derived_file,
    )
