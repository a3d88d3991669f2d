"""Handlers for terraform subcommands."""

import sys

from pyterraform.exceptions import PyterraformError
from pyterraform.lib.command_helpers import CommandContext, build_options, handle_dry_run
from pyterraform.lib.output import ask_confirmation, error, info, success, warning
from pyterraform.terraform import Terraform

from .operations import DryRunTerraform, run_subcommand

SUCCESS_MESSAGES = {
    "init": "Terraform initialized successfully",
    "apply": "Infrastructure changes applied successfully",
    "destroy": "Infrastructure destroyed successfully",
    "refresh": "State refreshed successfully",
    "import": "Resource imported successfully",
    "taint": "Resource tainted successfully",
    "untaint": "Resource untainted successfully",
}


def handle(ctx: CommandContext) -> int:
    """Handle a terraform subcommand.

    Parameters
    ----------
    ctx : CommandContext
        Command context

    Returns
    -------
    int
        Exit code
    """
    args = ctx["args"]
    config = ctx["config"]
    name = args.command

    if name == "version":
        return handle_version(ctx)

    try:
        opts = build_options(args, config)
    except PyterraformError as e:
        error(str(e))
        return 1

    factory = DryRunTerraform if ctx["dry_run"] else Terraform
    terraform = factory.from_config(config)

    if name in ("apply", "destroy") and not args.auto_approve and not ctx["dry_run"]:
        if not _confirm(name, terraform.work_dir):
            info(f"{name.capitalize()} cancelled")
            return 0
        args.auto_approve = True

    result = run_subcommand(terraform, name, args, opts)

    if handle_dry_run(ctx, f"Run {result.command}", {"working_directory": terraform.work_dir}):
        return 0

    if not result.ok:
        if result.output:
            print(result.output, file=sys.stderr, end="" if result.output.endswith("\n") else "\n")
        error(f"terraform {name} failed")
        return 1

    if result.output:
        print(result.output, end="")

    if name in SUCCESS_MESSAGES and not ctx.get("quiet"):
        success(SUCCESS_MESSAGES[name])

    return 0


def handle_version(ctx: CommandContext) -> int:
    """Print the stripped terraform version."""
    terraform = Terraform.from_config(ctx["config"])

    if handle_dry_run(ctx, f"Run {terraform.build_command('version')}"):
        return 0

    try:
        print(terraform.version())
    except PyterraformError as e:
        error(str(e))
        return 1

    return 0


def _confirm(name: str, work_dir: str) -> bool:
    if name == "destroy":
        warning(f"This will DELETE all infrastructure resources managed in {work_dir}")
        return ask_confirmation("Are you ABSOLUTELY SURE you want to destroy?", default=False)

    warning(f"You are about to apply changes to the infrastructure managed in {work_dir}")
    return ask_confirmation("Are you sure you want to continue?", default=False)
