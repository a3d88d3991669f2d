"""Dispatch of parsed CLI arguments onto the Terraform wrapper."""

import logging
from typing import Any

from pyterraform.process import Callback, CommandResult
from pyterraform.terraform import Terraform

logger = logging.getLogger(__name__)


class DryRunTerraform(Terraform):
    """Terraform wrapper that records command lines instead of running them."""

    def terraform(
        self,
        sub_command_string: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        command = self.build_command(sub_command_string)
        logger.debug(f"dry run, not executing [{command}]")
        return CommandResult(command=command, output="")


def run_subcommand(terraform: Terraform, name: str, args: Any, opts: dict[str, Any]) -> CommandResult:
    """Call the wrapper method for a subcommand.

    Parameters
    ----------
    terraform : Terraform
        Wrapper to call.
    name : str
        Subcommand name as typed on the command line.
    args : argparse.Namespace
        Parsed arguments holding positionals.
    opts : dict[str, Any]
        Terraform options for the subcommand.

    Returns
    -------
    CommandResult
        Outcome of the run.

    Raises
    ------
    ValueError
        If the subcommand is unknown.
    """
    if name in ("apply", "destroy"):
        method = getattr(terraform, name)
        return method(opts, auto_approve=getattr(args, "auto_approve", False))
    if name in ("init", "get", "graph", "refresh", "console", "fmt"):
        return getattr(terraform, name)(opts)
    if name == "plan":
        return terraform.plan(opts, dir_or_plan=args.positional)
    if name == "output":
        return terraform.output(opts, name=args.positional)
    if name == "show":
        return terraform.show(opts, path=args.positional)
    if name == "validate":
        return terraform.validate(opts, path=args.positional)
    if name == "push":
        return terraform.push(opts, directory=args.positional)
    if name == "import":
        return terraform.import_(opts, args.addr, args.resource_id)
    if name == "taint":
        return terraform.taint(opts, args.name)
    if name == "untaint":
        return terraform.untaint(opts, args.name)
    raise ValueError(f"Unknown subcommand: {name}")
