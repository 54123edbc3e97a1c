"""
Project initialization: scaffold a new app directory from the bundled template.

This runs outside any existing project, so unlike the dispatcher it resolves
no config, runs no setup script and consults no command registry.
"""

import sys
from pathlib import Path

from mobilecli.scaffold.adapter import CreateSuppressingAdapter, TerminalAdapter
from mobilecli.scaffold.environment import Environment
from mobilecli.scaffold.generator import ScaffoldError

APP_NAMESPACE = "app:app"
APP_TEMPLATE_DIR = Path(__file__).parent / "templates" / "app"

# argv is e.g. ['mobile-cli', 'init', 'AwesomeApp', '--verbose']
_TRAILING_ARGS_OFFSET = 3


def normalize_args(args_or_name, argv=None) -> list:
    """A list is used as-is; a name is prepended to the args after it in argv."""
    if isinstance(args_or_name, (list, tuple)):
        return list(args_or_name)
    argv = sys.argv if argv is None else argv
    return [args_or_name] + list(argv[_TRAILING_ARGS_OFFSET:])


def init(project_dir, args_or_name, argv=None, adapter=None) -> None:
    """
    Create the template for a new app.

    Args:
        project_dir: templates are copied here.
        args_or_name: project name, or the full list of arguments for the generator.
        argv: raw process arguments; defaults to sys.argv.
        adapter: base terminal adapter; its create channel is suppressed.
    """
    print(f"Setting up new app in {project_dir}")
    env = Environment(CreateSuppressingAdapter(adapter or TerminalAdapter()))
    env.register(APP_TEMPLATE_DIR, APP_NAMESPACE)

    generator = env.create(APP_NAMESPACE, args=normalize_args(args_or_name, argv))
    generator.destination_root(project_dir)
    generator.run()


__all__ = ["ScaffoldError", "init", "normalize_args"]
