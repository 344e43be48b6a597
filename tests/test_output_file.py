"""Tests for the output-file writer (infra/output_file.py).

Real files are written under ``tmp_path``; OS failures are simulated by
patching ``os`` functions inside the module.

Coverage:
* Bytes written verbatim, including binary content.
* Owner-only permissions on creation.
* Truncation of an existing file.
* Open / write / short-write / close failures.
"""

from __future__ import annotations

import errno
import os
import re
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from wallet_client.exceptions import OutputFileError
from wallet_client.infra.output_file import write_output_file

KEYTAB_BYTES = b"\x05\x02\x00\x00\x00\x3a\x00\x01\x00\x0bEXAMPLE.COM\x00\xff\n"


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestWriteOutputFile:
    def test_bytes_round_trip(self, tmp_path: Path) -> None:
        target = tmp_path / "keytab"
        written = write_output_file(str(target), KEYTAB_BYTES)

        assert written == len(KEYTAB_BYTES)
        assert target.read_bytes() == KEYTAB_BYTES

    def test_empty_payload(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        assert write_output_file(str(target), b"") == 0
        assert target.read_bytes() == b""

    def test_created_owner_only(self, tmp_path: Path) -> None:
        target = tmp_path / "secret"
        old_umask = os.umask(0)
        try:
            write_output_file(str(target), b"x")
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(target.stat().st_mode) == 0o600

    def test_existing_file_truncated(self, tmp_path: Path) -> None:
        target = tmp_path / "secret"
        target.write_bytes(b"a much longer previous secret value")
        write_output_file(str(target), b"short")
        assert target.read_bytes() == b"short"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestWriteOutputFileFailures:
    def test_open_failure(self, tmp_path: Path) -> None:
        target = tmp_path / "missing-dir" / "keytab"
        with pytest.raises(OutputFileError, match=re.escape(f"open of {target} failed: ")):
            write_output_file(str(target), b"x")

    def test_write_failure(self, tmp_path: Path) -> None:
        target = tmp_path / "keytab"
        with patch(
            "wallet_client.infra.output_file.os.write",
            side_effect=OSError(errno.ENOSPC, "No space left on device"),
        ):
            with pytest.raises(
                OutputFileError,
                match=re.escape(f"write to {target} failed: No space left on device"),
            ):
                write_output_file(str(target), b"x")

    def test_short_write(self, tmp_path: Path) -> None:
        target = tmp_path / "keytab"
        with patch("wallet_client.infra.output_file.os.write", return_value=2):
            with pytest.raises(OutputFileError, match=re.escape(f"write to {target} truncated")):
                write_output_file(str(target), b"four")

    def test_close_failure_warns_about_truncation(self, tmp_path: Path) -> None:
        target = tmp_path / "keytab"
        real_close = os.close

        def failing_close(fd: int) -> None:
            real_close(fd)
            raise OSError(errno.EIO, "Input/output error")

        with patch("wallet_client.infra.output_file.os.close", side_effect=failing_close):
            with pytest.raises(OutputFileError) as exc_info:
                write_output_file(str(target), b"x")
        assert str(exc_info.value) == (
            f"close of {target} failed (file probably truncated): Input/output error"
        )
