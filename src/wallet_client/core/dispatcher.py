"""Core dispatcher — builds the command vector and interprets the result.

The dispatcher delegates the remote call to a
:class:`~wallet_client.core.protocols.Transport` injected at
construction time.  It is responsible for:

* Building the command vector from the request.
* Delegating exactly one call to the transport.
* Ensuring only :class:`~wallet_client.exceptions.WalletError`
  subclasses escape.
* Choosing the :class:`~wallet_client.core.models.OutputRoute` for the
  result.

Performing the routed output is left to the CLI layer.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* No ``remctl`` import.
"""

from __future__ import annotations

import logging

from wallet_client.core.models import (
    CommandVector,
    InvocationRequest,
    InvocationResult,
    OutputRoute,
)
from wallet_client.core.protocols import Transport
from wallet_client.exceptions import TransportSetupError, WalletError

logger = logging.getLogger(__name__)


class Dispatcher:
    """Stateless service that runs one wallet command.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`Transport` protocol.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport: Transport = transport

    # ------------------------------------------------------------------
    # Command vector construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_command(request: InvocationRequest) -> CommandVector:
        """Return ``(command_type, *words)`` with no reordering or filtering."""
        return (request.command_type, *request.words)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def invoke(self, request: InvocationRequest) -> InvocationResult:
        """Send the request's command to the server.

        Remote failures come back inside the result; only a failure to
        make the call at all is raised.

        Raises
        ------
        TransportSetupError
            When the transport cannot make the call.
        EnvironmentError
            When the transport library is missing.
        """
        command = self.build_command(request)
        logger.debug(
            "invoking %s on %s:%d (principal %s)",
            command,
            request.server,
            request.port,
            request.principal or "default",
        )
        try:
            result = self._transport.invoke(
                request.server,
                request.port,
                request.principal,
                command,
            )
        except WalletError:
            raise
        except Exception as exc:
            raise TransportSetupError(
                f"cannot run remote command: {exc}",
            ) from exc
        logger.debug(
            "remote status %d, %d stdout bytes, %d stderr bytes",
            result.status,
            len(result.stdout),
            len(result.stderr),
        )
        return result

    @staticmethod
    def select_route(
        request: InvocationRequest,
        result: InvocationResult,
    ) -> OutputRoute:
        """Pick the single output route for *result*.

        Precedence: protocol error, remote diagnostics, ``get`` into an
        output file, then standard output.
        """
        if result.error:
            return OutputRoute.ERROR
        if result.stderr:
            return OutputRoute.DIAGNOSTIC
        if request.output_file is not None and request.is_get:
            return OutputRoute.FILE
        return OutputRoute.STDOUT
