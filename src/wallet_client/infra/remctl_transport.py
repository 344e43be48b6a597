"""remctl backed implementation of :class:`~wallet_client.core.protocols.Transport`.

This module is the **only** place in the codebase that imports
``remctl`` (the ``pyremctl`` binding).  Protocol errors are folded into
the returned :class:`~wallet_client.core.models.InvocationResult`; every
other remctl failure is re-raised as a typed
:class:`~wallet_client.exceptions.WalletError` subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from wallet_client.core.models import InvocationResult
from wallet_client.exceptions import EnvironmentError, TransportSetupError

logger = logging.getLogger(__name__)


class RemctlTransport:
    """Concrete :class:`Transport` backed by the remctl Python binding.

    Usage::

        transport = RemctlTransport()
        result = transport.invoke("wallet.example.com", 4444, None,
                                  ("wallet", "show", "keytab", "host/foo"))

    This class satisfies the :class:`~wallet_client.core.protocols.Transport`
    protocol structurally — no explicit inheritance required.
    """

    # pyremctl raises on a protocol error without reporting a status.
    PROTOCOL_ERROR_STATUS: int = 1

    @staticmethod
    def _load_module() -> Any:
        try:
            import remctl
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "remctl is not installed.",
                hint="Install with: pip install 'wallet-client[remctl]'",
            ) from exc
        return remctl

    @staticmethod
    def _as_bytes(value: bytes | str | None) -> bytes:
        if value is None:
            return b""
        if isinstance(value, str):
            return value.encode("utf-8", errors="surrogateescape")
        return bytes(value)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def invoke(
        self,
        server: str,
        port: int,
        principal: str | None,
        command: Sequence[str],
    ) -> InvocationResult:
        """Run *command* on *server* through remctl.

        Raises
        ------
        TransportSetupError
            When remctl cannot allocate or set up the call.
        EnvironmentError
            When the remctl binding is not installed.
        """
        remctl = self._load_module()
        logger.debug("remctl %s:%d %s", server, port, list(command))

        try:
            simple = remctl.remctl(server, port, principal, list(command))
        except remctl.RemctlProtocolError as exc:
            return InvocationResult(
                status=self.PROTOCOL_ERROR_STATUS,
                error=str(exc),
            )
        except MemoryError as exc:
            raise TransportSetupError(
                f"cannot allocate memory: {exc}",
            ) from exc
        except (remctl.RemctlError, ValueError, TypeError) as exc:
            raise TransportSetupError(
                f"cannot set up remctl call: {exc}",
            ) from exc

        return InvocationResult(
            status=int(simple.status),
            stdout=self._as_bytes(simple.stdout),
            stderr=self._as_bytes(simple.stderr),
        )
