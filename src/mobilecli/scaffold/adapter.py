"""
Terminal output for the scaffolding environment.

TerminalAdapter reports file operations on named log channels and asks
yes/no questions. CreateSuppressingAdapter wraps any adapter and silences
only the 'create' channel, so a fresh project does not print one line per
file while conflicts, prompts and errors still come through.
"""

import sys

# ---------------------------------------------------------------------------
# Log channels
# ---------------------------------------------------------------------------


class Log:
    CHANNELS = ("create", "force", "skip", "identical", "conflict", "info", "error")

    def __init__(self, stdout=None, stderr=None):
        self._stdout = stdout
        self._stderr = stderr

    def _out(self):
        return self._stdout or sys.stdout

    def _err(self):
        return self._stderr or sys.stderr

    def _status(self, status: str, message: str, stream) -> None:
        print(f"   {status:>9} {message}", file=stream)

    def __call__(self, message: str) -> None:
        print(message, file=self._out())

    def create(self, message: str) -> None:
        self._status("create", message, self._out())

    def force(self, message: str) -> None:
        self._status("force", message, self._out())

    def skip(self, message: str) -> None:
        self._status("skip", message, self._out())

    def identical(self, message: str) -> None:
        self._status("identical", message, self._out())

    def conflict(self, message: str) -> None:
        self._status("conflict", message, self._out())

    def info(self, message: str) -> None:
        self._status("info", message, self._out())

    def error(self, message: str) -> None:
        self._status("error", message, self._err())


class TerminalAdapter:
    _ANSWERS = {"y": True, "yes": True, "n": False, "no": False}

    def __init__(self, stdout=None, stderr=None, stdin=None):
        self.log = Log(stdout, stderr)
        self._stdin = stdin

    def prompt(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question. An empty answer or end of input picks default."""
        stdin = self._stdin if self._stdin is not None else sys.stdin
        out = self.log._out()
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            print(f"{question} {hint}: ", end="", file=out, flush=True)
            line = stdin.readline()
            answer = line.strip().lower()
            if not answer:
                return default
            if answer in self._ANSWERS:
                return self._ANSWERS[answer]
            print("  Please enter y or n.", file=out)


# ---------------------------------------------------------------------------
# Create suppression
# ---------------------------------------------------------------------------


class _CreateSuppressingLog:
    def __init__(self, base):
        self._base = base

    def __call__(self, message: str) -> None:
        self._base(message)

    def __getattr__(self, name):
        return getattr(self._base, name)

    def create(self, message: str) -> None:
        pass


class CreateSuppressingAdapter:
    """Forward everything to the wrapped adapter except log.create."""

    def __init__(self, base=None):
        self._base = base if base is not None else TerminalAdapter()
        self.log = _CreateSuppressingLog(self._base.log)

    def __getattr__(self, name):
        return getattr(self._base, name)
