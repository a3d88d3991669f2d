"""Terraform API class."""

import logging
import os
import re
from pathlib import Path
from typing import Any

from pyterraform.exceptions import TerraformVersionError
from pyterraform.lib.logger import setup_logger
from pyterraform.options import construct_opt_string
from pyterraform.process import Callback, CommandResult, run_command

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"Terraform v(\S+)")


def parse_version(text: str) -> str:
    """Extract the bare version from `terraform version` output.

    Parameters
    ----------
    text : str
        Output of `terraform version`.

    Returns
    -------
    str
        Version without the ``Terraform v`` prefix (e.g. ``0.8.5``).

    Raises
    ------
    TerraformVersionError
        If no version line is present.

    Examples
    --------
    >>> parse_version("Terraform v0.8.5\\n")
    '0.8.5'
    """
    match = VERSION_PATTERN.search(text)
    if not match:
        raise TerraformVersionError("No terraform version found in output", {"output": text.strip()})
    return match.group(1)


class Terraform:
    """
    Execute terraform subcommands.

    Each subcommand method serializes its options, appends positional
    arguments and runs the result through the shell. Every method accepts
    an optional ``callback(error, output)`` fired once after the process
    exits, and returns the :class:`CommandResult`.

    Subcommands that need further subcommands (``state``, ``remote``,
    ``debug``) are not wrapped.

    Attributes
    ----------
    terraform_binary : str
        Executable (or shell snippet) used as the command prefix.
    work_dir : str
        Working directory of every run.
    no_color : bool
        Append ``-no-color`` to every options string.
    debug : bool
        Log settings, commands, output chunks and exit codes.
    """

    def __init__(
        self,
        terraform_binary: str | None = None,
        work_dir: str | Path | None = None,
        no_color: bool = False,
        debug: bool = False,
    ):
        self.terraform_binary = terraform_binary or "terraform"
        self.work_dir = str(work_dir) if work_dir else os.getcwd()
        self.no_color = no_color
        self.debug = debug

        if self.debug:
            package_logger = logging.getLogger("pyterraform")
            if package_logger.handlers:
                package_logger.setLevel(logging.DEBUG)
            else:
                setup_logger("pyterraform", level="DEBUG")
            logger.debug(f"workdir : {self.work_dir}")
            logger.debug(f"terraformBinary : {self.terraform_binary}")
            logger.debug(f"noColor : {self.no_color}")
            logger.debug(f"debug : {self.debug}")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "Terraform":
        """
        Build an instance from a loaded configuration mapping.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration as returned by ``ConfigLoader.load``.

        Returns
        -------
        Terraform
            Configured wrapper.
        """
        return cls(
            terraform_binary=config.get("terraform_binary"),
            work_dir=config.get("work_dir"),
            no_color=bool(config.get("no_color", False)),
            debug=bool(config.get("debug", False)),
        )

    def _construct_opt_string(self, opts: dict[str, Any] | None) -> str:
        return construct_opt_string(opts, no_color=self.no_color)

    def build_command(self, sub_command_string: str | None = None) -> str:
        """Return the full command line for a subcommand string."""
        if sub_command_string:
            return f"{self.terraform_binary} {sub_command_string}"
        return self.terraform_binary

    def terraform(
        self,
        sub_command_string: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """
        Execute a terraform subcommand with its arguments and options.

        Parameters
        ----------
        sub_command_string : str, optional
            Subcommand followed by its options and arguments.
        callback : callable, optional
            Called once as ``callback(error, output)`` after exit.

        Returns
        -------
        CommandResult
            Outcome of the run.
        """
        command = self.build_command(sub_command_string)
        return run_command(command, cwd=self.work_dir, callback=callback, debug=self.debug)

    def version(self) -> str:
        """
        Retrieve a stripped version of terraform's executable version.

        Returns
        -------
        str
            Version string, e.g. ``0.8.5`` for ``Terraform v0.8.5``.

        Raises
        ------
        TerraformCommandError
            If `terraform version` wrote to its error stream.
        TerraformVersionError
            If the output contains no version.
        """
        output = self.terraform("version").raise_for_error()
        return parse_version(output)

    def apply(
        self,
        args: dict | None = None,
        auto_approve: bool = False,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform apply`."""
        command = f"apply{self._construct_opt_string(args)}"
        if auto_approve:
            command = f"{command} -auto-approve"
        return self.terraform(command, callback)

    def destroy(
        self,
        args: dict | None = None,
        auto_approve: bool = False,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform destroy`."""
        command = f"destroy{self._construct_opt_string(args)}"
        if auto_approve:
            command = f"{command} -auto-approve"
        return self.terraform(command, callback)

    def console(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform console`."""
        return self.terraform(f"console{self._construct_opt_string(args)}", callback)

    def fmt(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform fmt`."""
        return self.terraform(f"fmt{self._construct_opt_string(args)}", callback)

    def get(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform get`."""
        return self.terraform(f"get{self._construct_opt_string(args)}", callback)

    def graph(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform graph`."""
        return self.terraform(f"graph{self._construct_opt_string(args)}", callback)

    def import_(
        self,
        args: dict | None,
        addr: str,
        resource_id: str,
        callback: Callback | None = None,
    ) -> CommandResult:
        """
        Execute `terraform import`.

        Parameters
        ----------
        args : dict or None
            Options for this subcommand.
        addr : str
            Address to import the resource to.
        resource_id : str
            Resource-specific ID identifying the resource being imported.
        callback : callable, optional
            Called once as ``callback(error, output)`` after exit.
        """
        return self.terraform(f"import{self._construct_opt_string(args)} {addr} {resource_id}", callback)

    def init(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform init`."""
        return self.terraform(f"init{self._construct_opt_string(args)}", callback)

    def output(
        self,
        args: dict | None = None,
        name: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform output`, for all outputs or only ``name``."""
        command = f"output{self._construct_opt_string(args)}"
        if name:
            command = f"{command} {name}"
        return self.terraform(command, callback)

    def plan(
        self,
        args: dict | None = None,
        dir_or_plan: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform plan`."""
        command = f"plan{self._construct_opt_string(args)}"
        if dir_or_plan:
            command = f"{command} {dir_or_plan}"
        return self.terraform(command, callback)

    def push(
        self,
        args: dict | None = None,
        directory: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform push`."""
        command = f"push{self._construct_opt_string(args)}"
        if directory:
            command = f"{command} {directory}"
        return self.terraform(command, callback)

    def refresh(self, args: dict | None = None, callback: Callback | None = None) -> CommandResult:
        """Execute `terraform refresh`."""
        return self.terraform(f"refresh{self._construct_opt_string(args)}", callback)

    def show(
        self,
        args: dict | None = None,
        path: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform show`, defaulting to the local state file."""
        command = f"show{self._construct_opt_string(args)}"
        if path:
            command = f"{command} {path}"
        return self.terraform(command, callback)

    def taint(
        self,
        args: dict | None,
        name: str,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform taint` on resource ``name``."""
        return self.terraform(f"taint{self._construct_opt_string(args)} {name}", callback)

    def untaint(
        self,
        args: dict | None,
        name: str,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform untaint` on resource ``name``."""
        return self.terraform(f"untaint{self._construct_opt_string(args)} {name}", callback)

    def validate(
        self,
        args: dict | None = None,
        path: str | None = None,
        callback: Callback | None = None,
    ) -> CommandResult:
        """Execute `terraform validate`, in ``path`` or the working directory."""
        command = f"validate{self._construct_opt_string(args)}"
        if path:
            command = f"{command} {path}"
        return self.terraform(command, callback)


def version(terraform_binary: str = "terraform") -> str:
    """
    Retrieve a stripped version of terraform's executable version.

    Parameters
    ----------
    terraform_binary : str, optional
        Executable to query, by default "terraform".

    Returns
    -------
    str
        Version string, e.g. ``0.8.5``.
    """
    return Terraform(terraform_binary=terraform_binary).version()
