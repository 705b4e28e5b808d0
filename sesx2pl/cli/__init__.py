"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands. Keep this file minimal to avoid circular
imports and duplication.
"""
from sesx2pl.cli.helpers import cli  # root group
from sesx2pl.cli import convert_cmds  # noqa: F401
from sesx2pl.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
