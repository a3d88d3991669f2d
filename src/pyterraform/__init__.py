"""Programmatic wrapper around the terraform command-line tool."""

__version__ = "0.1.0"

from pyterraform.exceptions import (
    ConfigError,
    PyterraformError,
    TerraformCommandError,
    TerraformVersionError,
)
from pyterraform.options import construct_opt_string, normalize_arg
from pyterraform.process import CommandResult, run_command
from pyterraform.terraform import Terraform, parse_version, version

__all__ = [
    "CommandResult",
    "ConfigError",
    "PyterraformError",
    "Terraform",
    "TerraformCommandError",
    "TerraformVersionError",
    "__version__",
    "construct_opt_string",
    "normalize_arg",
    "parse_version",
    "run_command",
    "version",
]
