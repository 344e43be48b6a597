"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from wallet_client.core.models import InvocationResult


class Transport(Protocol):
    """Contract for the remote command transport.

    Any object that implements :meth:`invoke` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def invoke(
        self,
        server: str,
        port: int,
        principal: str | None,
        command: Sequence[str],
    ) -> InvocationResult:
        """Run *command* on *server* and return its result.

        A failure reported by the server or the protocol is returned in
        ``InvocationResult.error``, not raised.

        Raises
        ------
        TransportSetupError
            When the call cannot be made at all.
        EnvironmentError
            When the transport library is not installed.
        """
        ...  # pragma: no cover


class SrvtabWriter(Protocol):
    """Contract for the legacy srvtab formatter used by ``-S``."""

    def write(self, path: str, name: str, source_file: str) -> None:
        """Write a srvtab at *path* for *name* from the keytab *source_file*.

        Raises
        ------
        SrvtabError
            When the srvtab cannot be produced.
        """
        ...  # pragma: no cover
