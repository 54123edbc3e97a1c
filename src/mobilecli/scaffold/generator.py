"""
The application generator.

Renders a template directory into the destination root. File contents go
through string.Template ($name, $name_lower); path segments have the
placeholder project name HelloWorld replaced, and a leading underscore
becomes a dot so dotfiles survive packaging.
"""

import argparse
import re
from pathlib import Path
from string import Template

_PLACEHOLDER_NAME = "HelloWorld"
_VALID_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


class ScaffoldError(Exception):
    pass


def _build_parser():
    parser = argparse.ArgumentParser(prog="init", add_help=False, allow_abbrev=False)
    parser.add_argument("name", nargs="?")
    parser.add_argument("--skip-ios", action="store_true")
    parser.add_argument("--skip-android", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser


class AppGenerator:
    def __init__(self, args, template_path: Path, adapter):
        self.args = list(args)
        self.template_path = Path(template_path)
        self.adapter = adapter
        self.options, _ = _build_parser().parse_known_args(self.args)
        self._destination_root = Path.cwd()

    @property
    def name(self):
        return self.options.name

    def destination_root(self, path=None) -> Path:
        """Set the directory files are written into (creating it) and return it."""
        if path is not None:
            root = Path(path).resolve()
            root.mkdir(parents=True, exist_ok=True)
            self._destination_root = root
        return self._destination_root

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------

    def _context(self) -> dict:
        return {"name": self.name, "name_lower": self.name.lower()}

    def _skipped(self, rel: Path) -> bool:
        top = rel.parts[0]
        return (top == "ios" and self.options.skip_ios) or (
            top == "android" and self.options.skip_android
        )

    def _target_path(self, rel: Path) -> Path:
        parts = []
        for part in rel.parts:
            part = part.replace(_PLACEHOLDER_NAME, self.name)
            if part.startswith("_"):
                part = "." + part[1:]
            parts.append(part)
        return self._destination_root.joinpath(*parts)

    def _write(self, target: Path, content: str) -> None:
        shown = target.relative_to(self._destination_root).as_posix()
        if target.exists():
            if target.read_text(encoding="utf-8") == content:
                self.adapter.log.identical(shown)
                return
            self.adapter.log.conflict(shown)
            if not self.adapter.prompt(f"Overwrite {shown}?", default=False):
                self.adapter.log.skip(shown)
                return
            target.write_text(content, encoding="utf-8")
            self.adapter.log.force(shown)
            return

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        self.adapter.log.create(shown)

    # -----------------------------------------------------------------------
    # Public interface
    # -----------------------------------------------------------------------

    def run(self) -> None:
        if not self.name:
            raise ScaffoldError("A project name is required.")
        if not _VALID_NAME.match(self.name):
            raise ScaffoldError(
                f'"{self.name}" is not a valid name for a project. Please use a valid '
                "identifier name (alphanumeric, starting with a letter)."
            )
        if not self.template_path.is_dir():
            raise ScaffoldError(f"Template directory not found: {self.template_path}")

        context = self._context()
        for source in sorted(self.template_path.rglob("*")):
            if not source.is_file():
                continue
            rel = source.relative_to(self.template_path)
            if self._skipped(rel):
                continue
            content = Template(source.read_text(encoding="utf-8")).safe_substitute(
                context
            )
            self._write(self._target_path(rel), content)

        if self.options.verbose:
            self.adapter.log.info(f"template: {self.template_path}")
        self.adapter.log(f"Created {self.name} in {self._destination_root}")
