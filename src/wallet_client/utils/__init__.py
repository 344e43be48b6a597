"""Shared utilities — constants, logging setup, and cross-cutting concerns.

Rules
-----
* No business logic.
* No network or file I/O.
* Importable by any layer.
"""
