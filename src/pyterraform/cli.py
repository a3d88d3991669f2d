"""Main CLI entry point for pyterraform."""

import argparse
import sys
from pathlib import Path

from pyterraform import __version__
from pyterraform.config.loader import ConfigLoader
from pyterraform.exceptions import ConfigError
from pyterraform.lib.formatters import CapitalizedHelpFormatter, create_subparsers
from pyterraform.lib.logger import setup_logger
from pyterraform.lib.output import error, set_color_enabled


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser with all subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser with all subcommands registered.
    """
    parser = argparse.ArgumentParser(
        prog="pyterraform",
        description="Run terraform subcommands with options assembled from flags and config",
        formatter_class=CapitalizedHelpFormatter,
    )

    # Global options
    parser.add_argument("--version", "-v", action="version", version=f"pyterraform {__version__}")
    parser.add_argument("--config", "-c", type=Path, help="Config file path (default: auto-detect)")
    parser.add_argument("--binary", metavar="PATH", help="Terraform executable (default: terraform)")
    parser.add_argument(
        "--work-dir",
        "-d",
        type=Path,
        help="Directory to run terraform in (default: current directory)",
    )
    parser.add_argument("--no-color", action="store_true", help="Pass -no-color and disable colored output")
    parser.add_argument("--verbose", action="store_true", help="Log executed commands and their output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet mode (errors only)")
    parser.add_argument("--dry-run", action="store_true", help="Show the command without running it")

    parser._optionals.title = "Options"

    from pyterraform import commands

    subparsers = create_subparsers(parser, "command", help="Available commands")
    commands.register_parsers(subparsers)

    return parser


def apply_cli_overrides(config: dict, args: argparse.Namespace) -> dict:
    """
    Overlay global CLI flags on the loaded configuration.

    Parameters
    ----------
    config : dict
        Loaded configuration.
    args : argparse.Namespace
        Parsed global arguments.

    Returns
    -------
    dict
        The same configuration, updated in place.
    """
    if args.binary:
        config["terraform_binary"] = args.binary
    if args.work_dir:
        config["work_dir"] = str(args.work_dir)
    if args.no_color:
        config["no_color"] = True
    if args.verbose:
        config["debug"] = True
    return config


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point for the pyterraform command.

    Returns
    -------
    int
        Exit code: 0 for success, 1 for command failure, 2 for configuration error,
        130 for keyboard interrupt.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        set_color_enabled(False)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConfigLoader(config_path=args.config).load()
    except ConfigError as e:
        error(f"Failed to load configuration: {e}")
        return 2

    config = apply_cli_overrides(config, args)
    setup_logger(
        "pyterraform",
        level="DEBUG" if config.get("debug") else None,
        log_format=config.get("log_format"),
    )

    ctx = {
        "config": config,
        "verbose": args.verbose,
        "quiet": args.quiet,
        "dry_run": args.dry_run,
        "args": args,
    }

    from pyterraform import commands

    try:
        return commands.handle(ctx)
    except KeyboardInterrupt:
        print()
        return 130
    except Exception as e:
        error(f"Command failed: {e}")
        if ctx["verbose"]:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
