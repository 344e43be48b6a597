"""Infrastructure: writing a fetched object to the ``-f`` output file.

Rules
-----
* Raw ``os.open`` / ``os.write`` / ``os.close`` — no buffering layer.
* The file is created owner read-write only and truncated if present.
* Every step is checked before the next; failures raise
  :class:`~wallet_client.exceptions.OutputFileError` carrying the
  system error text.
"""

from __future__ import annotations

import logging
import os

from wallet_client.exceptions import OutputFileError
from wallet_client.utils.defaults import OUTPUT_FILE_MODE

logger = logging.getLogger(__name__)


def _strerror(exc: OSError) -> str:
    return exc.strerror or str(exc)


def write_output_file(path: str, data: bytes) -> int:
    """Replace the contents of *path* with *data*.

    Returns the number of bytes written, which always equals
    ``len(data)`` on success.

    Raises
    ------
    OutputFileError
        When the file cannot be opened, is only partly written, or
        cannot be closed.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
    except OSError as exc:
        raise OutputFileError(f"open of {path} failed: {_strerror(exc)}") from exc

    try:
        written = os.write(fd, data)
    except OSError as exc:
        os.close(fd)
        raise OutputFileError(f"write to {path} failed: {_strerror(exc)}") from exc
    if written != len(data):
        os.close(fd)
        raise OutputFileError(f"write to {path} truncated")

    try:
        os.close(fd)
    except OSError as exc:
        raise OutputFileError(
            f"close of {path} failed (file probably truncated): {_strerror(exc)}",
        ) from exc

    logger.debug("wrote %d bytes to %s", written, path)
    return written
