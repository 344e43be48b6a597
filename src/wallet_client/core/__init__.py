"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from wallet_client.core.dispatcher import Dispatcher
from wallet_client.core.models import (
    CommandVector,
    InvocationRequest,
    InvocationResult,
    OutputRoute,
)
from wallet_client.core.protocols import SrvtabWriter, Transport
from wallet_client.core.resolver import parse_port, resolve_request

__all__: list[str] = [
    "CommandVector",
    "Dispatcher",
    "InvocationRequest",
    "InvocationResult",
    "OutputRoute",
    "SrvtabWriter",
    "Transport",
    "parse_port",
    "resolve_request",
]
