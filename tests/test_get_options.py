import sys

import pytest
from rich.console import Console

from getoptions import (
    GetOptions,
    InvalidSpecFormatError,
    NilKeyAccessError,
    ParseError,
    TypeCoercionError,
    UnknownArgumentTypeError,
    UnknownOptionAccessError,
    UnknownOptionError,
)

SPECS = ["help", "debug!", "verbose+", "prefix:s", "size=i", "host=@s"]


def test_strings_short_and_long_type_names():
    assert GetOptions(["string=s"], ["--str", "test"])["string"] == "test"
    assert GetOptions(["string=string"], ["--str", "test"])["string"] == "test"


def test_integers_short_and_long_type_names():
    assert GetOptions(["int=i"], ["--int", "5"])["int"] == 5
    assert GetOptions(["int=integer"], ["--int", "5"])["int"] == 5


def test_floats_short_and_long_type_names():
    assert GetOptions(["float=f"], ["--float", "0.5"])["float"] == 0.5
    assert GetOptions(["float=float"], ["--float", "0.5"])["float"] == 0.5


@pytest.mark.parametrize(
    "spec, message",
    [("int=i", "expecting integer value"), ("float=f", "expecting float value")],
)
def test_non_numbers_are_rejected(spec, message):
    with pytest.raises(TypeCoercionError, match=message):
        GetOptions([spec], ["--" + spec.split("=")[0], "NaN"])


def test_flags():
    assert GetOptions(["flag!"], ["--flag"])["flag"] is True
    assert GetOptions(["flag!"], ["--no-flag"])["flag"] is False


def test_increment():
    assert GetOptions(["incr+"], [])["incr"] == 0
    assert GetOptions(["incr+"], ["-i"])["incr"] == 1
    assert GetOptions(["incr+"], ["-iiiii"])["incr"] == 5


def test_lists():
    assert GetOptions(["list=@s"], ["--list", "foo", "bar", "--li", "baz", "-l", "qux"])[
        "list"
    ] == ["foo", "bar", "baz", "qux"]
    assert GetOptions(["list=@i"], ["--list", "1", "-2", "--li", "3", "-l", "-4"])[
        "list"
    ] == [1, -2, 3, -4]


def test_list_coercion_failure():
    tokens = ["--list", "1", "2", "oops", "3"]
    with pytest.raises(TypeCoercionError, match="expecting integer value"):
        GetOptions(["list=@i"], tokens)


def test_optional_arguments():
    assert GetOptions(["string:s"], ["--str"])["string"] is None
    assert GetOptions(["int:i"], ["--int"])["int"] is None
    assert GetOptions(["float:f"], ["--float"])["float"] is None
    assert GetOptions(["list:@s"], ["--list"])["list"] == []


def test_optional_without_value_is_present():
    opts = GetOptions(["string:s", "other:s"], ["--string"])
    assert opts.has("string") is True
    assert opts["string"] is None
    assert opts.has("other") is False
    assert opts["other"] is None


def test_has():
    opts = GetOptions(["string:s"], ["--string"])
    assert opts.has("string") is True
    assert opts.has("blah") is False
    assert "string" in opts
    assert "blah" not in opts
    assert None not in opts


def test_has_nil_key():
    opts = GetOptions(["string:s"], ["--string"])
    with pytest.raises(NilKeyAccessError, match="cannot be an option key"):
        opts.has(None)
    with pytest.raises(NilKeyAccessError):
        opts.has("")


def test_leftover_no_option():
    tokens = ["--flag", "x1", "x2", "x3"]
    opts = GetOptions(["flag"], tokens)
    assert tokens == ["x1", "x2", "x3"]
    assert opts.leftover == ["x1", "x2", "x3"]


def test_leftover_required_option():
    tokens = ["--string", "test", "x1", "x2", "x3"]
    GetOptions(["string=s"], tokens)
    assert tokens == ["x1", "x2", "x3"]


def test_leftover_optional_option():
    tokens = ["--string", "x1", "x2", "x3"]
    GetOptions(["string:s"], tokens)
    assert tokens == ["x2", "x3"]


def test_stops_at_terminator():
    tokens = ["--list", "x1", "x2", "x3", "--", "x4", "x5", "x6"]
    GetOptions(["list=@s"], tokens)
    assert tokens == ["x4", "x5", "x6"]


def test_access_by_key_and_alias():
    opts = GetOptions(["flag|f|switch!"], ["--switch"])
    assert opts["flag"] is True
    assert opts.get("switch") is True
    assert opts.get("no-flag") is True
    assert opts.get("fl") is True
    assert opts.has("switch") is True


@pytest.mark.parametrize("key", [None, ""])
def test_get_nil_key(key):
    opts = GetOptions(["flag!"], ["--flag"])
    with pytest.raises(NilKeyAccessError, match="cannot be an option key"):
        opts.get(key)


def test_get_nil_key_before_any_parse_state():
    opts = GetOptions([], [])
    with pytest.raises(NilKeyAccessError):
        opts[None]


def test_get_unknown_key():
    opts = GetOptions(["flag!"], ["--flag"])
    with pytest.raises(UnknownOptionAccessError, match="program tried to access"):
        opts["notanoption"]
    with pytest.raises(ParseError):
        opts.get("notanoption")


def test_shorthand_multiple_flags():
    opts = GetOptions(["aflag", "bflag", "cflag"], ["-ac"])
    assert opts["aflag"] is True
    assert opts["bflag"] is None
    assert opts["cflag"] is True


def test_shorthand_multiple_arguments():
    opts = GetOptions(["astr=s", "bstr=s", "cstr=s"], ["-abc", "x1", "x2", "x3"])
    assert (opts["astr"], opts["bstr"], opts["cstr"]) == ("x1", "x2", "x3")


def test_shorthand_list_interoperability():
    opts = GetOptions(["aflag", "bflag", "cflag", "list=@s"], ["--list", "foo", "-bar", "-ac"])
    assert opts["aflag"] is True
    assert opts["bflag"] is None
    assert opts["cflag"] is True
    assert opts["list"] == ["foo", "-bar"]


def test_shorthand_list_interoperability_with_invalid_option():
    with pytest.raises(UnknownOptionError) as excinfo:
        GetOptions(["aflag", "bflag", "cflag", "list=@s"], ["--list", "foo", "-bar", "-ac", "-q"])
    assert str(excinfo.value) == "unknown option 'q'"


@pytest.mark.parametrize(
    "specs, tokens, key, expected",
    [
        (["flag!"], ["--flag", "--no-flag", "-f"], "flag", True),
        (["flag!"], ["--flag", "--no-flag"], "flag", False),
        (["float=f"], ["--float", "0.1", "-f", "0.2"], "float", 0.2),
        (["int=i"], ["--int", "1", "-i", "2"], "int", 2),
        (["string=s"], ["-s", "x1", "--string", "x2"], "string", "x2"),
    ],
)
def test_last_option_wins(specs, tokens, key, expected):
    assert GetOptions(specs, tokens)[key] == expected


def test_invalid_specs_fail_before_consuming_tokens():
    tokens = ["--arg", "val"]
    with pytest.raises(UnknownArgumentTypeError, match="unknown argument type"):
        GetOptions(["arg=bogus"], tokens)
    with pytest.raises(InvalidSpecFormatError):
        GetOptions(["arg="], tokens)
    assert tokens == ["--arg", "val"]


def test_unknown_option_in_tokens():
    with pytest.raises(UnknownOptionError, match="unknown option"):
        GetOptions(["string=s"], ["--notanoption"])


def test_debug_only():
    opts = GetOptions(SPECS, ["--debug"])
    assert opts["debug"] is True
    assert opts["help"] is None
    assert opts["verbose"] == 0
    assert opts["prefix"] is None
    assert opts["size"] is None
    assert opts["host"] is None
    assert opts.items() == [("debug", True)]


def test_counts_and_optional_list_with_terminator():
    tokens = ["-vv", "-w", "1", "-2", "--", "file1"]
    opts = GetOptions(["verbose+", "weights:@i"], tokens)
    assert opts["verbose"] == 2
    assert opts["weights"] == [1, -2]
    assert tokens == ["file1"]


def test_abbreviated_long_options_and_operands():
    tokens = ["--siz", "10", "file1", "file2", "file3"]
    opts = GetOptions(SPECS, tokens)
    assert opts["size"] == 10
    assert tokens == ["file1", "file2", "file3"]


def test_for_each_and_items():
    opts = GetOptions(["foo", "bar", "baz", "qux"], ["--foo", "--bar", "--qux"])
    seen = []
    opts.for_each(lambda key, value: seen.append(f"{key}={value}"))
    assert sorted(seen) == ["bar=True", "foo=True", "qux=True"]
    assert dict(opts.items()) == {"foo": True, "bar": True, "qux": True}


def test_collect_style_iteration():
    opts = GetOptions(["a+", "b+", "c+"], ["-aaa", "-bbbb", "-ccccc"])
    values = [value if key in ("a", "b") else 0 for key, value in opts.items()]
    assert sorted(values) == [0, 3, 4]


def test_describe():
    opts = GetOptions(
        ["flag", "string=s", "int:i", "verbose+", "list=@s"],
        ["--int", "5", "-vvv", "--list", "1", "2", "3", "--flag", "--string", "test"],
    )
    assert opts.describe() == "\n".join(
        [
            "flag: True",
            "int: 5",
            "list: ['1', '2', '3']",
            "string: 'test'",
            "verbose: 3",
        ]
    )
    assert str(opts) == opts.describe()


def test_describe_empty():
    assert GetOptions(["flag"], []).describe() == ""


def test_to_dict_is_a_copy():
    opts = GetOptions(["flag"], ["--flag"])
    values = opts.to_dict()
    values["flag"] = False
    assert opts["flag"] is True


def test_repr():
    opts = GetOptions(["flag", "verbose+"], ["--flag", "x"])
    assert repr(opts) == "GetOptions(options=2, parsed=1, leftover=1)"


def test_default_tokens_come_from_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "-vv", "file1", "--", "file2"])
    opts = GetOptions(["verbose+"])
    assert opts["verbose"] == 2
    assert sys.argv == ["prog", "file1", "file2"]
    assert opts.leftover == ["file1", "file2"]


def test_render():
    console = Console(record=True, width=80)
    opts = GetOptions(["verbose+", "host=@s"], ["-v", "--host", "a", "--", "rest"])
    opts.render(console)
    output = console.export_text()
    assert "verbose" in output
    assert "['a']" in output
    assert "leftover: rest" in output
