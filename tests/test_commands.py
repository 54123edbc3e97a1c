"""Tests for the command registry."""

import pytest

import mobilecli
from mobilecli import tools
from mobilecli.commands import (
    ALL_COMMANDS,
    COMMANDS,
    DEPENDENCIES_COMMAND,
    CommandEntry,
    all_commands,
    build_table,
    documented_commands,
    exported_commands,
    undocumented_commands,
)

DOCUMENTED = [
    "start",
    "bundle",
    "unbundle",
    "new-library",
    "android",
    "run-android",
    "log-android",
    "run-ios",
    "log-ios",
    "upgrade",
    "link",
]


def test_documented_commands_in_insertion_order():
    assert list(documented_commands()) == DOCUMENTED


def test_documented_commands_have_descriptions():
    assert all(entry.description for entry in documented_commands().values())


def test_undocumented_commands():
    hidden = undocumented_commands()
    assert set(hidden) == {"--version", "init"}
    assert all(entry.description == "" for entry in hidden.values())


def test_all_commands_is_disjoint_union():
    documented = set(documented_commands())
    hidden = set(undocumented_commands())

    assert not documented & hidden
    assert set(all_commands()) == documented | hidden
    assert len(ALL_COMMANDS) == len(COMMANDS)


def test_all_commands_returns_a_copy():
    table = all_commands()
    table.pop("bundle")
    assert "bundle" in ALL_COMMANDS


def test_entries_are_immutable():
    entry = ALL_COMMANDS["bundle"]
    with pytest.raises(AttributeError):
        entry.handler = None


def test_build_table_rejects_duplicate_names():
    entries = [
        CommandEntry("start", tools.server, "one"),
        CommandEntry("start", tools.version, documented=False),
    ]
    with pytest.raises(ValueError, match="start"):
        build_table(entries)


def test_exported_commands_exclude_hidden_entries():
    exported = exported_commands()

    assert set(exported) == set(DOCUMENTED) | {DEPENDENCIES_COMMAND}
    assert "--version" not in exported
    assert "init" not in exported


def test_exported_commands_map_to_handlers():
    exported = exported_commands()

    assert exported[DEPENDENCIES_COMMAND] is tools.dependencies
    for name in DOCUMENTED:
        assert exported[name] is ALL_COMMANDS[name].handler


def test_dependencies_is_not_dispatchable():
    assert DEPENDENCIES_COMMAND not in ALL_COMMANDS


def test_package_exports_public_commands():
    assert mobilecli.EXPORTED_COMMANDS == exported_commands()


def test_handler_annotation_documents_contract():
    from typing import get_type_hints

    from mobilecli.commands import Handler

    assert get_type_hints(CommandEntry)["handler"] == Handler
