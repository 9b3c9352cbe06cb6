import pytest

from minish.env import (
    Environment,
    export_line,
    is_invalid_identifier,
    remove_plus,
    split_assignment,
)


@pytest.fixture
def env():
    return Environment(["USER=alice", "HOME=/home/alice", "FLAG", "PATH=/bin:/usr/bin"])


def test_get_returns_value(env):
    assert env.get("USER") == "alice"
    assert env.get("HOME") == "/home/alice"


def test_get_missing_and_valueless(env):
    assert env.get("MISSING") is None
    assert env.get("FLAG") is None


def test_get_does_not_match_prefix():
    assert Environment(["USERNAME=bob"]).get("USER") is None


def test_exists(env):
    assert env.exists("FLAG") is True
    assert env.exists("USER") is True
    assert env.exists("USE") is False
    assert env.exists("USERS") is False


def test_export_new_variable_is_appended(env):
    env.export("NEW=1")
    assert list(env)[-1] == "NEW=1"
    assert env.get("NEW") == "1"
    assert len(env) == 5


def test_export_replaces_existing():
    env = Environment(["A=1", "B=2"])
    env.export("A=2")
    assert list(env) == ["A=2", "B=2"]


def test_export_bare_name_keeps_existing_value():
    env = Environment(["A=1"])
    env.export("A")
    assert list(env) == ["A=1"]


def test_export_bare_name_added_without_value():
    env = Environment([])
    env.export("NAME")
    assert list(env) == ["NAME"]
    assert env.exists("NAME")
    assert env.get("NAME") is None


def test_export_plus_appends_value():
    env = Environment(["A=1"])
    env.export("A+=2")
    assert env.get("A") == "12"
    assert len(env) == 1


def test_export_plus_on_valueless_entry():
    env = Environment(["A"])
    env.export("A+=x")
    assert list(env) == ["A=x"]


def test_export_plus_on_missing_variable_drops_plus():
    env = Environment([])
    env.export("B+=v")
    assert list(env) == ["B=v"]


@pytest.mark.parametrize("argument", ["1A=x", "=x", "A-B=1", ""])
def test_export_invalid_raises(argument):
    env = Environment(["A=1"])
    with pytest.raises(ValueError):
        env.export(argument)
    assert list(env) == ["A=1"]


@pytest.mark.parametrize(
    "argument, invalid",
    [
        ("VAR=1", False),
        ("_var2", False),
        ("A+=b", False),
        ("9LIVES", True),
        ("=value", True),
        ("A.B=1", True),
        ("A+B=1", True),
    ],
)
def test_is_invalid_identifier(argument, invalid):
    assert is_invalid_identifier(argument) is invalid


def test_remove_plus_drops_every_plus():
    argument = "A+=b+c"
    result = remove_plus(argument)
    assert "+" not in result
    assert len(result) == len(argument) - argument.count("+")
    assert remove_plus("PLAIN=1") == "PLAIN=1"


def test_split_assignment():
    assert split_assignment("PATH=/bin") == ("PATH", "/bin")
    assert split_assignment("A=b=c") == ("A", "b=c")
    assert split_assignment("A=") == ("A", None)
    assert split_assignment("A") == ("A", None)


def test_export_line_formats():
    assert export_line("A=b") == 'export A="b"'
    assert export_line("A=") == 'export A=""'
    assert export_line("A") == "export A"


def test_sorted_entries_orders_without_mutating():
    entries = ["b=1", "A=2", "a=3", "AB"]
    env = Environment(entries)
    assert env.sorted_entries() == ["A=2", "AB", "a=3", "b=1"]
    assert list(env) == entries


def test_unset_removes_named_variables_only():
    env = Environment(["A=1", "B=2", "AB=3", "C"])
    env.unset(["A", "C"])
    assert list(env) == ["B=2", "AB=3"]


def test_unset_unknown_name_is_ignored():
    env = Environment(["A=1"])
    env.unset(["Z", "A=1"])
    assert list(env) == ["A=1"]


def test_search_path(env):
    assert env.search_path() == "/bin:/usr/bin"
    assert Environment(["HOME=/"]).search_path() is None
    assert Environment(["PATH="]).search_path() == ""


def test_to_dict_skips_valueless_entries(env):
    result = env.to_dict()
    assert result["USER"] == "alice"
    assert "FLAG" not in result
    assert len(result) == 3


def test_from_os(monkeypatch):
    monkeypatch.setenv("MINISH_TEST_VAR", "value")
    env = Environment.from_os()
    assert env.get("MINISH_TEST_VAR") == "value"


def test_iteration_is_a_snapshot():
    env = Environment(["A=1"])
    snapshot = iter(env)
    env.export("B=2")
    assert list(snapshot) == ["A=1"]
    assert len(env) == 2