"""Shared pytest fixtures and configuration for the wallet-client test suite.

Guidelines
----------
* No network access and no Kerberos in any test.
* remctl must be faked at the transport boundary.
* Core tests must be pure — no side effects.
* File output goes to ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from wallet_client.core.models import InvocationResult


@dataclass
class FakeTransport:
    """Transport double that records calls and returns a canned result."""

    result: InvocationResult = field(
        default_factory=lambda: InvocationResult(status=0),
    )
    calls: list[tuple[str, int, str | None, tuple[str, ...]]] = field(
        default_factory=list,
    )

    def invoke(
        self,
        server: str,
        port: int,
        principal: str | None,
        command: Sequence[str],
    ) -> InvocationResult:
        self.calls.append((server, port, principal, tuple(command)))
        return self.result


@dataclass
class RecordingSrvtabWriter:
    """Srvtab writer double; raises *error* when set."""

    error: Exception | None = None
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    def write(self, path: str, name: str, source_file: str) -> None:
        self.calls.append((path, name, source_file))
        if self.error is not None:
            raise self.error


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def srvtab_writer() -> RecordingSrvtabWriter:
    return RecordingSrvtabWriter()
