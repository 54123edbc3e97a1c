"""
Command registry for mobile-cli.

One immutable table of CommandEntry values. Documented and undocumented
commands share a single keyspace; the documented flag only controls whether
a command shows up in usage text and in the exported API.
"""

from dataclasses import dataclass
from typing import Callable

from mobilecli import tools
from mobilecli.config import Config

# (args, config) -> None, or an awaitable the dispatcher runs to completion.
Handler = Callable[[list[str], Config], object]


@dataclass(frozen=True)
class CommandEntry:
    name: str
    handler: Handler
    description: str = ""
    documented: bool = True


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

COMMANDS = (
    CommandEntry("start", tools.server, "starts the webserver"),
    CommandEntry("bundle", tools.bundle, "builds the javascript bundle for offline use"),
    CommandEntry(
        "unbundle", tools.unbundle, 'builds javascript as "unbundle" for offline use'
    ),
    CommandEntry("new-library", tools.library, "generates a native library bridge"),
    CommandEntry(
        "android", tools.generate_android, "generates an Android project for your app"
    ),
    CommandEntry(
        "run-android",
        tools.run_android,
        "builds your app and starts it on a connected Android emulator or device",
    ),
    CommandEntry("log-android", tools.log_android, "print Android logs"),
    CommandEntry(
        "run-ios", tools.run_ios, "builds your app and starts it on iOS simulator"
    ),
    CommandEntry("log-ios", tools.log_ios, "print iOS logs"),
    CommandEntry(
        "upgrade",
        tools.upgrade,
        "upgrade your app's template files to the latest version; run this after "
        "updating the mobile-cli version in your package.json and running npm install",
    ),
    CommandEntry("link", tools.link, "link a library"),
    CommandEntry("--version", tools.version, documented=False),
    CommandEntry("init", tools.print_init_warning, documented=False),
)

# Always available to embedders, never dispatched from the command line.
DEPENDENCIES_COMMAND = "dependencies"


def build_table(entries) -> dict:
    """Index entries by name. Duplicate names are a programming error."""
    table = {}
    for entry in entries:
        if entry.name in table:
            raise ValueError(f"Duplicate command name: {entry.name!r}")
        table[entry.name] = entry
    return table


ALL_COMMANDS = build_table(COMMANDS)


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def all_commands() -> dict:
    return dict(ALL_COMMANDS)


def documented_commands() -> dict:
    return {name: e for name, e in ALL_COMMANDS.items() if e.documented}


def undocumented_commands() -> dict:
    return {name: e for name, e in ALL_COMMANDS.items() if not e.documented}


def exported_commands() -> dict:
    """
    Handlers exposed to code embedding mobile-cli as a library.

    The documented commands plus dependency introspection; hidden commands
    such as the init guard are left out.
    """
    exported = {DEPENDENCIES_COMMAND: tools.dependencies}
    for name, entry in documented_commands().items():
        exported[name] = entry.handler
    return exported
