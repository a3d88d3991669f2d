"""Terraform subcommands exposed by the pyterraform CLI.

Available subcommands:
    pyterraform init | get | graph | refresh | console | fmt
    pyterraform plan [DIR_OR_PLAN]
    pyterraform apply | destroy [--auto-approve]
    pyterraform output [NAME]
    pyterraform show [PATH]
    pyterraform validate [PATH]
    pyterraform push [DIR]
    pyterraform import ADDR ID
    pyterraform taint | untaint NAME
    pyterraform version
"""

from .handlers import handle
from .parser import register_parsers

__all__ = ["register_parsers", "handle"]
