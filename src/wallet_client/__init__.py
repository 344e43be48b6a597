"""wallet-client — command-line front end for the wallet credential service.

Turns a fixed-shape command line into one remote command invocation and
routes the result to the console, a file, or a srvtab writer.
"""

from wallet_client.version import __version__

__all__: list[str] = ["__version__"]
