"""Argument parsers for terraform subcommands."""

import argparse

# Subcommands taking only options
OPTION_ONLY_SUBCOMMANDS = {
    "init": "Initialize a working directory",
    "get": "Download and update modules",
    "graph": "Create a visual graph of resources",
    "refresh": "Update local state against real resources",
    "console": "Evaluate expressions",
    "fmt": "Rewrite configuration files to canonical format",
}


def _add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the flags every wrapped subcommand understands."""
    parser.add_argument(
        "--var",
        action="append",
        metavar="KEY=VALUE",
        help="Set a terraform variable (repeatable)",
    )
    parser.add_argument(
        "--var-file",
        action="append",
        metavar="FILE",
        help="Load variables from a file (repeatable)",
    )
    parser.add_argument(
        "--target",
        action="append",
        metavar="ADDR",
        help="Limit the operation to a resource address (repeatable)",
    )
    parser.add_argument(
        "--opt",
        action="append",
        metavar="NAME=VALUE",
        help="Pass -NAME=VALUE to terraform (repeatable)",
    )
    parser.add_argument(
        "--flag",
        action="append",
        metavar="NAME",
        help="Pass the bare flag -NAME to terraform (repeatable)",
    )


def register_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Register all terraform subcommand parsers.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    for name, help_text in OPTION_ONLY_SUBCOMMANDS.items():
        _add_option_arguments(subparsers.add_parser(name, help=help_text))

    # ========== apply / destroy ==========
    for name, help_text in (
        ("apply", "Apply infrastructure changes"),
        ("destroy", "Destroy infrastructure"),
    ):
        parser = subparsers.add_parser(name, help=help_text)
        _add_option_arguments(parser)
        parser.add_argument(
            "--auto-approve",
            action="store_true",
            help="Skip confirmation prompt",
        )

    # ========== subcommands with an optional positional ==========
    for name, metavar, help_text, arg_help in (
        ("plan", "DIR_OR_PLAN", "Plan infrastructure changes", "Directory or saved plan"),
        ("output", "NAME", "Show outputs", "Specific output name (optional)"),
        ("show", "PATH", "Show state or a saved plan", "State or plan file (optional)"),
        ("validate", "PATH", "Validate configuration files", "Directory to validate (optional)"),
        ("push", "DIR", "Upload configuration to a remote service", "Configuration directory (optional)"),
    ):
        parser = subparsers.add_parser(name, help=help_text)
        _add_option_arguments(parser)
        parser.add_argument("positional", nargs="?", metavar=metavar, help=arg_help)

    # ========== import ==========
    import_parser = subparsers.add_parser("import", help="Import existing infrastructure")
    _add_option_arguments(import_parser)
    import_parser.add_argument("addr", help="Address to import the resource to")
    import_parser.add_argument("resource_id", metavar="ID", help="Resource-specific ID")

    # ========== taint / untaint ==========
    for name, help_text in (
        ("taint", "Mark a resource for recreation"),
        ("untaint", "Remove the taint mark from a resource"),
    ):
        parser = subparsers.add_parser(name, help=help_text)
        _add_option_arguments(parser)
        parser.add_argument("name", help="Resource address")

    # ========== version ==========
    subparsers.add_parser("version", help="Show the terraform version")
