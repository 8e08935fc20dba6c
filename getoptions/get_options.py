# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `GetOptions`, the public entry point of the package.

`GetOptions` compiles a list of Getopt::Long style specifications, parses a
token list against them, and exposes the results through explicit lookups.

Specification syntax:
    help            -- plain flag, `--help` or an abbreviation like `-h`
    debug!          -- `--debug` sets True, `--no-debug` sets False
    name|a1|a2      -- `|` declares aliases, `name` is the result key
    verbose+        -- counter, `-vvv` gives 3
    prefix:s        -- optional argument of type s
    size=i          -- required argument of type i
    host=@s         -- list argument, values accumulate

    Types: s|string, i|integer, f|float

Example Usage:
    tokens = ["--debug", "--host", "a", "b", "--", "file1"]
    opts = GetOptions(["help", "debug!", "verbose+", "host=@s"], tokens)

    opts.get("debug")    # True
    opts["verbose"]      # 0
    opts.has("help")     # False
    tokens               # ["file1"]

When no token list is given, `sys.argv[1:]` is parsed and whatever is left over
is written back into `sys.argv[1:]`. Pass a copy if `sys.argv` must stay intact.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from getoptions.console import console as default_console
from getoptions.exceptions import NilKeyAccessError, UnknownOptionAccessError
from getoptions.parser.matcher import OptionMatcher
from getoptions.parser.option_table import OptionTable
from getoptions.parser.spec_compiler import compile_specs


class GetOptions:
    """
    Parses a token list against option specifications.

    Attributes:
        table (OptionTable): Every recognized spelling and its definition.
        leftover (list[str]): Tokens that were not options or option arguments.
    """

    def __init__(self, specs: Iterable[str], tokens: list[str] | None = None) -> None:
        self.table: OptionTable = compile_specs(specs)
        if tokens is None:
            tokens = sys.argv[1:]
            result = OptionMatcher(self.table).parse(tokens)
            sys.argv[1:] = result.leftover
        else:
            result = OptionMatcher(self.table).parse(tokens)
        self._values: dict[str, Any] = result.values
        self.leftover: list[str] = result.leftover

    def _check_key(self, key: str | None) -> str:
        if key is None or key == "":
            raise NilKeyAccessError()
        return str(key)

    def get(self, key: str) -> Any:
        """
        Return the parsed value for an option.

        Any declared spelling works as the key, including aliases and
        abbreviations. Declared options that were not given report `0` for
        counters and `None` otherwise.

        Raises:
            NilKeyAccessError: If `key` is None or empty.
            UnknownOptionAccessError: If `key` was never declared.
        """
        name = self._check_key(key)
        definition = self.table.get(name)
        if definition is None:
            raise UnknownOptionAccessError(name)
        if definition.key in self._values:
            return self._values[definition.key]
        return definition.default

    def has(self, key: str) -> bool:
        """
        Return True if the option appeared in the parsed tokens.

        Unlike `get()`, an undeclared key is not an error and returns False.

        Raises:
            NilKeyAccessError: If `key` is None or empty.
        """
        name = self._check_key(key)
        canonical = self.table.canonical_key(name)
        return canonical is not None and canonical in self._values

    def for_each(self, callback: Callable[[str, Any], Any]) -> None:
        """Call `callback(key, value)` for every option that was parsed."""
        for key, value in self._values.items():
            callback(key, value)

    def items(self) -> list[tuple[str, Any]]:
        """Return `(key, value)` pairs for every option that was parsed."""
        return list(self._values.items())

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the result map."""
        return dict(self._values)

    def describe(self) -> str:
        """Return one `key: value` line per parsed option, sorted by key."""
        return "\n".join(
            f"{key}: {value!r}" for key, value in sorted(self._values.items())
        )

    def render(self, console: Console | None = None) -> None:
        """Print the parsed options and leftover tokens as a Rich table."""
        console = console or default_console
        table = Table(title="Options", show_header=True, header_style="bold")
        table.add_column("Option", style="bold cyan")
        table.add_column("Value", style="green")
        for key, value in sorted(self._values.items()):
            table.add_row(escape(key), escape(repr(value)))
        console.print(table)
        if self.leftover:
            console.print(f"[dim]leftover:[/dim] {escape(' '.join(self.leftover))}")

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return self.has(key)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"GetOptions(options={len(self.table.definitions)}, "
            f"parsed={len(self._values)}, leftover={len(self.leftover)})"
        )
