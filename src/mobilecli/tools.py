"""
Handlers for the commands backed by external tools.

Each tool is a command line in config["tools"]. The handler runs it with the
command's own arguments (everything after the command name) appended, so the
bundler, packager, device loggers and friends keep their own argument grammar.
"""

import json
import shlex
import subprocess
import sys
from pathlib import Path


def _run_tool(tool: str, args: list, config) -> None:
    command = shlex.split(config["tools"][tool]) + list(args)
    subprocess.run(command, check=True)


def _delegating(tool: str):
    def handler(args, config):
        _run_tool(tool, args[1:], config)

    handler.__name__ = tool.replace("-", "_")
    handler.__doc__ = f"Run the configured '{tool}' tool with the command's arguments."
    return handler


server = _delegating("start")
bundle = _delegating("bundle")
unbundle = _delegating("unbundle")
dependencies = _delegating("dependencies")
library = _delegating("new-library")
run_android = _delegating("run-android")
log_android = _delegating("log-android")
run_ios = _delegating("run-ios")
log_ios = _delegating("log-ios")
upgrade = _delegating("upgrade")
link = _delegating("link")


def generate_android(args, config) -> None:
    """Generate the Android project for the app in the current directory."""
    project_path = Path.cwd()
    with open(project_path / "package.json", encoding="utf-8") as f:
        project_name = json.load(f)["name"]

    _run_tool(
        "generate",
        [
            "--platform",
            "android",
            "--project-path",
            str(project_path),
            "--project-name",
            project_name,
        ],
        config,
    )


def version(args, config) -> None:
    from mobilecli import __version__

    print(f"mobile-cli: {__version__}")


def print_init_warning(args, config) -> None:
    # Projects are created with the standalone installer from outside any
    # project, so reaching this means one already exists here.
    print(
        "\n".join(
            [
                "Looks like a mobile-cli project already exists in the current",
                "folder. Run this command from a different folder or remove node_modules/mobile-cli",
            ]
        )
    )
    sys.exit(1)
