"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults, and the request invariants.
"""

from __future__ import annotations

import dataclasses

import pytest

from wallet_client.core.models import InvocationRequest, InvocationResult, OutputRoute


# ---------------------------------------------------------------------------
# Fixtures — reusable model instances
# ---------------------------------------------------------------------------

def _make_request(**overrides: object) -> InvocationRequest:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "words": ("get", "keytab", "host/example.com"),
    }
    defaults.update(overrides)
    return InvocationRequest(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# InvocationRequest
# ---------------------------------------------------------------------------

class TestInvocationRequest:
    def test_defaults(self) -> None:
        r = _make_request()
        assert r.command_type == "wallet"
        assert r.server == "wallet.example.com"
        assert r.port == 4444
        assert r.principal is None
        assert r.output_file is None
        assert r.derived_file is None

    def test_frozen(self) -> None:
        r = _make_request()
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.port = 1  # type: ignore[misc]

    def test_is_get(self) -> None:
        assert _make_request().is_get is True
        assert _make_request(words=("show", "file", "x")).is_get is False

    def test_object_name_is_third_word(self) -> None:
        r = _make_request(words=("get", "keytab", "host/a", "extra"))
        assert r.object_name == "host/a"

    def test_too_few_words_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 3"):
            _make_request(words=("get", "keytab"))

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range_rejected(self, port: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            _make_request(port=port)

    def test_output_file_requires_get(self) -> None:
        with pytest.raises(ValueError, match="get"):
            _make_request(words=("show", "file", "x"), output_file="out")

    def test_derived_file_requires_output_file(self) -> None:
        with pytest.raises(ValueError, match="output_file"):
            _make_request(derived_file="srvtab")

    def test_derived_file_requires_keytab(self) -> None:
        with pytest.raises(ValueError, match="keytab"):
            _make_request(
                words=("get", "file", "x"),
                output_file="out",
                derived_file="srvtab",
            )

    def test_full_srvtab_request_accepted(self) -> None:
        r = _make_request(output_file="out", derived_file="srvtab")
        assert r.derived_file == "srvtab"


# ---------------------------------------------------------------------------
# InvocationResult
# ---------------------------------------------------------------------------

class TestInvocationResult:
    def test_defaults(self) -> None:
        r = InvocationResult(status=3)
        assert r.status == 3
        assert r.stdout == b""
        assert r.stderr == b""
        assert r.error is None

    def test_frozen(self) -> None:
        r = InvocationResult(status=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.status = 1  # type: ignore[misc]


# ---------------------------------------------------------------------------
# OutputRoute
# ---------------------------------------------------------------------------

class TestOutputRoute:
    def test_members_in_precedence_order(self) -> None:
        assert [route.name for route in OutputRoute] == [
            "ERROR",
            "DIAGNOSTIC",
            "FILE",
            "STDOUT",
        ]
