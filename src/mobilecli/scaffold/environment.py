"""Registry of templates and the factory for their generators."""

from pathlib import Path

from mobilecli.scaffold.adapter import TerminalAdapter
from mobilecli.scaffold.generator import AppGenerator, ScaffoldError


class Environment:
    def __init__(self, adapter=None):
        self.adapter = adapter if adapter is not None else TerminalAdapter()
        self._templates = {}

    def register(self, template_path, namespace: str) -> None:
        template_path = Path(template_path)
        if not template_path.is_dir():
            raise ScaffoldError(f"Template directory not found: {template_path}")
        self._templates[namespace] = template_path

    def namespaces(self) -> list:
        return list(self._templates)

    def create(self, namespace: str, args=()) -> AppGenerator:
        if namespace not in self._templates:
            raise ScaffoldError(
                f"You don't seem to have a generator with the name {namespace} installed."
            )
        return AppGenerator(args, self._templates[namespace], self.adapter)
