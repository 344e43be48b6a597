"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``-h``, ``-v``, usage errors) remain
functional even when Rich is not installed.

Diagnostics (``wallet: <message>``) are written straight to stderr so a
server message reaches it unchanged, tabs and control characters
included.  Rich renders the remaining free-form lines such as hints.
Payload bytes never pass through the console.
"""

from __future__ import annotations

import sys
from typing import Any

from wallet_client.exceptions import EnvironmentError
from wallet_client.utils.defaults import PROGRAM_NAME


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(
			*objects, markup=False, highlight=False, emoji=False, soft_wrap=True,
		)

	def diagnostic(self, message: str) -> None:
		"""Print ``wallet: <message>`` exactly, bypassing Rich rendering."""
		sys.stderr.write(f"{PROGRAM_NAME}: {message}\n")
		sys.stderr.flush()


console = _ConsoleProxy()


def write_stdout_bytes(data: bytes) -> None:
	"""Copy *data* to standard output unchanged."""
	sys.stdout.flush()
	sys.stdout.buffer.write(data)
	sys.stdout.buffer.flush()


def write_stderr_bytes(data: bytes) -> None:
	"""Copy *data* to standard error after the program-name prefix."""
	sys.stderr.flush()
	sys.stderr.buffer.write(f"{PROGRAM_NAME}: ".encode())
	sys.stderr.buffer.write(data)
	sys.stderr.buffer.flush()
