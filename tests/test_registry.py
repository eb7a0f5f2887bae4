import pytest

from ircline.commands.registry import COMMANDS, CommandRegistry
from ircline.models import CommandKind, ParamKind


def test_sentinel_is_first_entry():
    registry = CommandRegistry()
    assert registry[0].name == ""
    assert registry[0].is_sentinel
    assert registry.sentinel is registry[0]


def test_registry_requires_sentinel_first():
    with pytest.raises(ValueError):
        CommandRegistry(COMMANDS[1:])


def test_names_are_unique_and_prefixed():
    names = [command.name for command in COMMANDS[1:]]
    assert len(names) == len(set(names))
    assert all(name.startswith("/") for name in names)


def test_lookup_is_exact_and_case_sensitive():
    registry = CommandRegistry()
    assert registry.lookup("/join").kind is CommandKind.JOIN
    assert registry.lookup("/JOIN") is None
    assert registry.lookup("/jo") is None
    assert registry.lookup("/frob") is None


def test_prefix_matches_keeps_table_order_and_ignores_case():
    registry = CommandRegistry()
    names = [command.name for _, command in registry.prefix_matches("/Q")]
    assert names == ["/quit", "/query"]
    assert registry.prefix_matches("/jo") == [(8, registry.lookup("/join"))]


def test_x_is_an_alias_of_query():
    registry = CommandRegistry()
    query = registry.lookup("/query")
    alias = registry.lookup("/x")
    assert alias.kind is query.kind
    assert alias.parameters == query.parameters
    assert alias.first_param_kind is ParamKind.NICK_OR_CHANNEL


def test_describe_all_renders_placeholders_in_order():
    registry = CommandRegistry()
    entries = {entry.name: entry for entry in registry.describe_all()}
    assert len(entries) == len(registry)
    assert entries["/tlsconnect"].placeholders == ["<server>", "<nick>"]
    assert entries["/status"].placeholders == []
    assert entries["/join"].render() == "/join <channel> - Join a channel."
