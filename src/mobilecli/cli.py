"""
Command dispatcher for mobile-cli.

Looks the first argument up in the command registry and hands the full
argument list, plus the resolved Config, to that command's handler. The only
option understood at this level is --config; everything else belongs to the
command.
"""

import argparse
import asyncio
import inspect
import sys

from mobilecli.commands import ALL_COMMANDS, documented_commands
from mobilecli.config import resolve_config
from mobilecli.setup_env import run_setup_env

PROG = "mobile-cli"


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG, add_help=False, allow_abbrev=False, exit_on_error=False
    )
    parser.add_argument(
        "--config",
        default="",
        help="Path to CLI configuration file",
    )
    return parser


def print_usage() -> None:
    """Print the documented commands and exit with status 1."""
    lines = ["Usage: " + PROG + " <command>", "", "Commands:"]
    for name, entry in documented_commands().items():
        lines.append(f"  - {name}: {entry.description}")
    print("\n".join(lines))
    sys.exit(1)


async def _wait(awaitable):
    return await awaitable


def run(argv=None) -> None:
    """Parse the command line and run one command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage()

    run_setup_env()

    command = ALL_COMMANDS.get(args[0])
    if command is None:
        print(f"Command `{args[0]}` unrecognized", file=sys.stderr)
        print_usage()
        return

    try:
        options, _ = build_parser().parse_known_args(args)
    except argparse.ArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_usage()
        return
    config = resolve_config(options.config)

    result = command.handler(args, config)
    if inspect.isawaitable(result):
        asyncio.run(_wait(result))


def main():
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
