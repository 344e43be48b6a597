"""Default :class:`~wallet_client.core.protocols.SrvtabWriter` adapter.

Converting a keytab into a legacy srvtab is the job of an external
formatter.  This installation ships none, so the default writer reports
``-S`` as unavailable with a typed error.  A real writer can be passed to
:func:`wallet_client.cli.app.main` instead.
"""

from __future__ import annotations

from wallet_client.exceptions import SrvtabError


class UnavailableSrvtabWriter:
    """:class:`SrvtabWriter` that always fails with :class:`SrvtabError`."""

    def write(self, path: str, name: str, source_file: str) -> None:
        raise SrvtabError(
            f"cannot write srvtab {path} for {name}: no srvtab writer available",
            hint=f"The keytab was saved to {source_file}.",
        )
