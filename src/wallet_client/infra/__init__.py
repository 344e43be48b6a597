"""Infrastructure layer — external system integration.

This layer wraps all interaction with remctl and the operating system.
Every raw third-party exception must be caught here and re-raised as a
:class:`~wallet_client.exceptions.WalletError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from wallet_client.infra.output_file import write_output_file
from wallet_client.infra.remctl_transport import RemctlTransport
from wallet_client.infra.srvtab import UnavailableSrvtabWriter

__all__: list[str] = [
    "RemctlTransport",
    "UnavailableSrvtabWriter",
    "write_output_file",
]
