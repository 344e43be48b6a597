"""CLI application entry point and output routing for wallet-client.

This module is the **sole error boundary** for the entire application.
It catches :class:`~wallet_client.exceptions.WalletError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
``wallet: <message>`` diagnostics and returning well-defined exit codes.

Architecture notes
------------------
* Validation lives in :mod:`wallet_client.core.resolver`; result
  interpretation lives in :mod:`wallet_client.core.dispatcher`.  This
  module only parses, wires, and performs the routed output.
* When a remote call was made, its status is the process exit code,
  even if the remote side reported an error.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn

from wallet_client.cli import exit_codes
from wallet_client.cli.console import console, write_stderr_bytes, write_stdout_bytes
from wallet_client.core.dispatcher import Dispatcher
from wallet_client.core.models import InvocationRequest, OutputRoute
from wallet_client.core.protocols import SrvtabWriter, Transport
from wallet_client.core.resolver import resolve_request
from wallet_client.exceptions import UsageError, WalletError
from wallet_client.utils.defaults import DEFAULT_PORT, DEFAULT_SERVER, PROGRAM_NAME
from wallet_client.utils.log import configure_logging
from wallet_client.version import __version__

USAGE = f"""\
Usage: {PROGRAM_NAME} [options] <command> <type> <name> [<arg> ...]
       {PROGRAM_NAME} [options] acl <command> <id> [<arg> ...]

Options:
    -c <command>    Command prefix to use (default: wallet)
    -f <output>     For the get command, output file (default: stdout)
    -k <principal>  Kerberos principal of the server
    -h              Display this help
    -p <port>       Port of server (default: {DEFAULT_PORT})
    -S <srvtab>     For the get keytab command, srvtab output file
    -s <server>     Server hostname (default: {DEFAULT_SERVER})
    -v              Display the version of wallet
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports shape errors as :class:`UsageError`."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    Options may be interleaved with positionals; ``--`` ends option
    parsing.  Help and version are plain flags so that :func:`main`
    controls where their output goes.
    """
    parser = _ArgumentParser(prog=PROGRAM_NAME, add_help=False, allow_abbrev=False)
    parser.add_argument("-c", dest="command_type", metavar="command")
    parser.add_argument("-f", dest="output_file", metavar="output")
    parser.add_argument("-k", dest="principal", metavar="principal")
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-p", dest="port", metavar="port")
    parser.add_argument("-S", dest="derived_file", metavar="srvtab")
    parser.add_argument("-s", dest="server", metavar="server")
    parser.add_argument("-v", dest="version", action="store_true")
    parser.add_argument("words", nargs="*", default=[])
    return parser


_VALUE_OPTIONS = frozenset("cfkpSs")


def _scan_info_flags(argv: list[str]) -> tuple[bool, bool]:
    """Return ``(help, version)`` as getopt would see them in *argv*.

    Runs ahead of argparse so ``-h`` and ``-v`` win over any shape error
    elsewhere on the line.  Values of the value-taking options are
    skipped, clustered flags such as ``-hv`` are expanded, and ``--``
    ends the scan.
    """
    want_help = want_version = False
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            break
        if not token.startswith("-") or token == "-" or token.startswith("--"):
            continue
        for index, flag in enumerate(token[1:], start=1):
            if flag in _VALUE_OPTIONS:
                if index == len(token) - 1:
                    next(tokens, None)
                break
            if flag == "h":
                want_help = True
            elif flag == "v":
                want_version = True
    return want_help, want_version


def _print_usage(*, to_stderr: bool) -> None:
    stream = sys.stderr if to_stderr else sys.stdout
    stream.write(USAGE)
    stream.flush()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_invocation(
    request: InvocationRequest,
    transport: Transport,
    srvtab_writer: SrvtabWriter,
) -> int:
    """Run the command once and route its result.

    Flow:
    1. Invoke the remote command through the dispatcher.
    2. Select exactly one output route.
    3. Perform the routed output.
    4. Return the remote status as the exit code.
    """
    from wallet_client.infra.output_file import write_output_file

    dispatcher = Dispatcher(transport)
    result = dispatcher.invoke(request)
    route = dispatcher.select_route(request, result)

    if route is OutputRoute.ERROR:
        console.diagnostic(str(result.error))
    elif route is OutputRoute.DIAGNOSTIC:
        write_stderr_bytes(result.stderr)
    elif route is OutputRoute.FILE and request.output_file is not None:
        write_output_file(request.output_file, result.stdout)
        if request.derived_file is not None:
            srvtab_writer.write(
                request.derived_file,
                request.object_name,
                request.output_file,
            )
    else:
        write_stdout_bytes(result.stdout)

    return result.status


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    transport: Transport | None = None,
    srvtab_writer: SrvtabWriter | None = None,
) -> int:
    """Run the wallet CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    transport:
        Remote command transport.  Defaults to
        :class:`~wallet_client.infra.remctl_transport.RemctlTransport`.
    srvtab_writer:
        Writer used for ``-S``.  Defaults to
        :class:`~wallet_client.infra.srvtab.UnavailableSrvtabWriter`.

    Returns
    -------
    int
        OS process exit code: 0 or 1 for local outcomes, otherwise the
        remote command's status.

    Raises
    ------
    WalletError
        For validation failures and local system errors; :func:`cli`
        renders these.
    """
    configure_logging()
    if argv is None:
        argv = sys.argv[1:]

    want_help, want_version = _scan_info_flags(argv)
    if want_help:
        _print_usage(to_stderr=False)
        return exit_codes.SUCCESS
    if want_version:
        print(f"{PROGRAM_NAME} {__version__}")
        return exit_codes.SUCCESS

    parser = _build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError:
        _print_usage(to_stderr=True)
        return exit_codes.GENERAL_ERROR

    try:
        request = resolve_request(
            args.words,
            command_type=args.command_type,
            server=args.server,
            port=args.port,
            principal=args.principal,
            output_file=args.output_file,
            derived_file=args.derived_file,
        )
    except UsageError:
        _print_usage(to_stderr=True)
        return exit_codes.GENERAL_ERROR

    if transport is None:
        from wallet_client.infra.remctl_transport import RemctlTransport

        transport = RemctlTransport()
    if srvtab_writer is None:
        from wallet_client.infra.srvtab import UnavailableSrvtabWriter

        srvtab_writer = UnavailableSrvtabWriter()

    return _handle_invocation(request, transport, srvtab_writer)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except WalletError as exc:
        console.diagnostic(str(exc))
        if exc.hint:
            console.print(exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except KeyboardInterrupt:
        console.print()
        console.diagnostic("aborted by user")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.diagnostic(
            f"unexpected error, please report this issue: "
            f"{type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
