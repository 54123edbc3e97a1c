"""mobile-cli: command dispatch and project bootstrap for mobile app development."""

__version__ = "0.1.0"

from mobilecli.cli import run  # noqa: E402
from mobilecli.commands import exported_commands  # noqa: E402
from mobilecli.scaffold import init  # noqa: E402

EXPORTED_COMMANDS = exported_commands()

__all__ = ["EXPORTED_COMMANDS", "__version__", "init", "run"]
