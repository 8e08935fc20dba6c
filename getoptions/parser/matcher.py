# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionMatcher`, the engine that walks a token stream
against a compiled `OptionTable` and builds the result map.

Token classes, tested in order:
- `--`: terminator. Scanning stops and everything after it is left alone.
- `--name[=value]`: long option. An inline value is pushed back onto the
  stream so it is collected like any other argument.
- `-abc[=value]`: short cluster. Every character is matched on its own, left
  to right, so `-vvv` counts three times and `-abc x y z` can feed one
  argument to each of three options.
- Anything else is an operand. Operands are set aside and handed back to the
  caller, ahead of whatever followed the terminator.

Argument-taking options collect tokens greedily but stop at anything that is
really another known option. Text that only looks like an option, such as
`-2` when no option is spelled `2`, is taken as an argument.

Example Usage:
    table = compile_specs(["verbose+", "weights:@i"])
    tokens = ["-vv", "-w", "1", "-2", "--", "file1"]
    result = OptionMatcher(table).parse(tokens)

    # result.values == {"verbose": 2, "weights": [1, -2]}
    # tokens == result.leftover == ["file1"]
"""
from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from typing import Any

from getoptions.exceptions import (
    MissingRequiredArgumentError,
    TypeCoercionError,
    UnknownOptionError,
)
from getoptions.logger import logger
from getoptions.parser.coercion import coerce
from getoptions.parser.option_definition import OptionDefinition
from getoptions.parser.option_kind import ContainerShape, OptionKind
from getoptions.parser.option_table import OptionTable

TERMINATOR = "--"
LONG_OPTION = re.compile(r"--(\S+)")
SHORT_OPTION = re.compile(r"-(\S+)")


@dataclass
class ParseResult:
    """Result map and leftover tokens from one parse."""

    values: dict[str, Any] = field(default_factory=dict)
    leftover: list[str] = field(default_factory=list)


class OptionMatcher:
    """
    Matches a token stream against an `OptionTable`.

    A matcher holds no per-parse state between calls; every `parse()` starts
    from an empty result map.
    """

    def __init__(self, table: OptionTable) -> None:
        self.table = table

    def _split_inline_value(self, body: str, stream: deque[str]) -> str:
        """Strip `=value` from an option body and push the value back."""
        name, sep, value = body.partition("=")
        if sep:
            stream.appendleft(value)
        return name

    def _is_argument(self, token: str) -> bool:
        """Return True if `token` can be taken as an option argument."""
        if token == TERMINATOR:
            return False
        long_match = LONG_OPTION.match(token)
        if long_match:
            name = long_match.group(1).partition("=")[0]
            return name not in self.table
        short_match = SHORT_OPTION.match(token)
        if short_match:
            cluster = short_match.group(1).partition("=")[0]
            return not all(char in self.table for char in cluster)
        return True

    def _collect_arguments(
        self, definition: OptionDefinition, stream: deque[str]
    ) -> list[str]:
        collected: list[str] = []
        while stream and self._is_argument(stream[0]):
            collected.append(stream.popleft())
            if definition.container is ContainerShape.SCALAR:
                break
        return collected

    def _store_arguments(
        self,
        definition: OptionDefinition,
        tokens: list[str],
        values: dict[str, Any],
    ) -> None:
        key = definition.key
        if not tokens:
            if definition.kind is OptionKind.REQUIRED_VALUE:
                raise MissingRequiredArgumentError(key)
            if key not in values:
                if definition.container is ContainerShape.LIST:
                    values[key] = []
                else:
                    values[key] = None
            return

        for token in tokens:
            coercion = coerce(token, definition.value_type)
            if not coercion.ok:
                raise TypeCoercionError(key, definition.value_type, token)
            if definition.container is ContainerShape.LIST:
                values.setdefault(key, []).append(coercion.value)
            else:
                values[key] = coercion.value

    def _process(
        self, spelling: str, stream: deque[str], values: dict[str, Any]
    ) -> None:
        definition = self.table.get(spelling)
        if definition is None:
            raise UnknownOptionError(spelling, self.table.suggest(spelling))

        key = definition.key
        kind = definition.kind
        if kind is OptionKind.BOOLEAN:
            values[key] = True
        elif kind is OptionKind.NEGATABLE:
            values[key] = spelling != definition.negated_spelling
        elif kind is OptionKind.INCREMENT:
            values[key] = values.get(key, 0) + 1
        elif kind in (OptionKind.OPTIONAL_VALUE, OptionKind.REQUIRED_VALUE):
            arguments = self._collect_arguments(definition, stream)
            self._store_arguments(definition, arguments, values)
        else:
            assert False, f"Unhandled option kind: {kind}"
        logger.debug("Matched '%s' -> %s = %r", spelling, key, values.get(key))

    def parse(self, tokens: list[str]) -> ParseResult:
        """
        Consume `tokens` and return the parsed values and leftover tokens.

        The caller's list is rewritten in place to hold the leftover: operands
        in the order they were seen, followed by every token after `--`.

        Args:
            tokens (list[str]): Mutable token list, consumed from the front.

        Returns:
            ParseResult: The result map and the leftover tokens.

        Raises:
            UnknownOptionError: An option token matched no spelling.
            MissingRequiredArgumentError: A `=` option received no argument.
            TypeCoercionError: An argument did not convert to the declared type.
        """
        stream: deque[str] = deque(tokens)
        values: dict[str, Any] = {}
        operands: list[str] = []

        while stream:
            token = stream.popleft()
            if token == TERMINATOR:
                break

            long_match = LONG_OPTION.match(token)
            if long_match:
                name = self._split_inline_value(long_match.group(1), stream)
                self._process(name, stream, values)
                continue

            short_match = SHORT_OPTION.match(token)
            if short_match:
                cluster = self._split_inline_value(short_match.group(1), stream)
                for char in cluster:
                    self._process(char, stream, values)
                continue

            operands.append(token)

        leftover = operands + list(stream)
        tokens[:] = leftover
        logger.debug("Parsed %d options, %d tokens left over", len(values), len(leftover))
        return ParseResult(values, leftover)
