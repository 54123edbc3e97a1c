"""
Platform environment setup, run before any command.

The setup scripts ship inside the package. On native Windows the .bat file
goes through cmd /c; elsewhere the .sh file is handed to sh so it does not
depend on the executable bit surviving installation.
"""

import subprocess
import sys
from pathlib import Path

_SCRIPTS_DIR = Path(__file__).parent


def setup_env_command(platform: str = sys.platform) -> list:
    if platform.startswith("win"):
        return ["cmd", "/c", str(_SCRIPTS_DIR / "setup_env.bat")]
    return ["sh", str(_SCRIPTS_DIR / "setup_env.sh")]


def run_setup_env(platform: str = sys.platform) -> None:
    """Run the setup script to completion. A non-zero exit raises CalledProcessError."""
    subprocess.run(setup_env_command(platform), check=True)
