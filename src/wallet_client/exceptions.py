"""Custom exception hierarchy for wallet-client.

All exceptions that cross layer boundaries must inherit from
:class:`WalletError`.  Raw third-party exceptions (e.g. from ``remctl``)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
WalletError
├── UsageError
├── InvalidPortError
├── OptionConflictError
├── TransportSetupError
├── OutputFileError
├── SrvtabError
└── EnvironmentError
"""

from __future__ import annotations


class WalletError(Exception):
    """Base exception for all wallet-client errors.

    The CLI error boundary renders every subclass as
    ``wallet: <message>`` on standard error and exits with status 1.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument resolution ---------------------------------------------------

class UsageError(WalletError):
    """Raised when the command line does not have the expected shape.

    The CLI answers this with the usage message on standard error rather
    than a one-line diagnostic.
    """


class InvalidPortError(WalletError):
    """Raised when the ``-p`` value is not an integer in 1–65535."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid port number {value}")
        self.value: str = value


class OptionConflictError(WalletError):
    """Raised when ``-f`` or ``-S`` is combined with an unsupported command."""


# --- Remote invocation -----------------------------------------------------

class TransportSetupError(WalletError):
    """Raised when the remote call cannot be made at all.

    Distinct from a remote failure: a remote failure still produces an
    :class:`~wallet_client.core.models.InvocationResult` with a status.
    """


# --- Output routing --------------------------------------------------------

class OutputFileError(WalletError):
    """Raised when the ``-f`` output file cannot be opened, written or closed."""


class SrvtabError(WalletError):
    """Raised when the srvtab writer fails to produce the ``-S`` file."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WalletError):
    """Raised when a required runtime dependency is not available."""
