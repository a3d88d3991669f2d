"""
Command Helper Functions.

Functions
---------
handle_dry_run : Handle dry-run mode with consistent messaging
parse_key_value : Split a KEY=VALUE argument
build_options : Assemble a terraform options mapping from parsed CLI arguments
"""

from typing import Any, TypedDict

from pyterraform.exceptions import PyterraformError
from pyterraform.lib.output import info


class CommandContext(TypedDict):
    """
    Type-safe command context dictionary.

    Attributes
    ----------
    config : dict
        Loaded configuration dictionary.
    verbose : bool
        Enable verbose output.
    quiet : bool
        Suppress success messages.
    dry_run : bool
        Print commands without executing them.
    args : argparse.Namespace
        Parsed command-line arguments.
    """

    config: dict
    verbose: bool
    quiet: bool
    dry_run: bool
    args: object  # argparse.Namespace


def handle_dry_run(ctx: CommandContext, message: str, details: dict = None) -> bool:
    """
    Handle dry-run mode with consistent messaging.

    Parameters
    ----------
    ctx : CommandContext
        Command context dictionary.
    message : str
        Main action description (e.g., "Run terraform plan").
    details : dict, optional
        Additional details to display (e.g., working directory).

    Returns
    -------
    bool
        True if in dry-run mode (caller should return early), False otherwise.

    Examples
    --------
    >>> if handle_dry_run(ctx, "Run terraform init", {"working_directory": "/infra"}):
    ...     return 0
    """
    if not ctx.get("dry_run"):
        return False

    info(f"DRY RUN: {message}")

    if details:
        for key, value in details.items():
            info(f"  {key}: {value}")

    return True


def parse_key_value(raw: str) -> tuple[str, str]:
    """
    Split a ``KEY=VALUE`` argument on its first ``=``.

    Raises
    ------
    PyterraformError
        If there is no ``=`` or the key is empty.
    """
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise PyterraformError(f"Expected KEY=VALUE, got '{raw}'")
    return key, value


def build_options(args: Any, config: dict) -> dict[str, Any]:
    """
    Assemble a terraform options mapping from parsed CLI arguments.

    Configured ``vars`` come first and are overridden by ``--var``.
    ``--opt`` given once yields a single value, given repeatedly a list.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments of a subcommand.
    config : dict
        Loaded configuration.

    Returns
    -------
    dict[str, Any]
        Options ready for ``construct_opt_string``.
    """
    opts: dict[str, Any] = {}

    variables = dict(config.get("vars") or {})
    for raw in getattr(args, "var", None) or []:
        key, value = parse_key_value(raw)
        variables[key] = value
    if variables:
        opts["var"] = variables

    var_files = getattr(args, "var_file", None)
    if var_files:
        opts["var_file"] = list(var_files)

    targets = getattr(args, "target", None)
    if targets:
        opts["target"] = list(targets)

    for raw in getattr(args, "opt", None) or []:
        key, value = parse_key_value(raw)
        if key == "var":
            raise PyterraformError("Use --var KEY=VALUE for terraform variables")
        if key not in opts:
            opts[key] = value
        elif isinstance(opts[key], list):
            opts[key].append(value)
        else:
            opts[key] = [opts[key], value]

    for flag in getattr(args, "flag", None) or []:
        opts[flag] = True

    return opts
