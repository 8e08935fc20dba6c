# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Compiles option specification strings into an `OptionTable`.

Grammar:
    spec      := forms (modifier)? (binding)?
    forms     := name ('|' name)*
    modifier  := '!' | '+'
    binding   := ('=' | ':') ('@')? typeToken
    typeToken := 's' | 'string' | 'i' | 'integer' | 'f' | 'float'

Examples:
    help            → BOOLEAN
    debug!          → NEGATABLE, also registers `no-debug`
    verbose|v+      → INCREMENT, reachable as `verbose` and `v`
    prefix:s        → OPTIONAL_VALUE, scalar string
    size=i          → REQUIRED_VALUE, scalar integer
    host=@s         → REQUIRED_VALUE, list of strings

Once every spec is registered, unambiguous prefixes of the declared forms are
added as abbreviation entries. That is also what makes single-letter short
options work: `-v` resolves to `verbose` when nothing else starts with `v`.
"""
from __future__ import annotations

import re
from typing import Iterable

from getoptions.exceptions import InvalidSpecFormatError, UnknownArgumentTypeError
from getoptions.logger import logger
from getoptions.parser.abbrev import abbreviations
from getoptions.parser.option_definition import OptionDefinition
from getoptions.parser.option_kind import ContainerShape, OptionKind, ValueType
from getoptions.parser.option_table import OptionTable

NAME = r"[^\s|=:!+@\-][^\s|=:!+@]*"

SPEC_PATTERN = re.compile(
    rf"(?P<forms>{NAME}(?:\|{NAME})*)"
    r"(?:(?P<modifier>[!+])|(?P<binding>[=:])(?P<container>@)?(?P<type>\w+))?"
)


def compile_spec(spec: str) -> OptionDefinition:
    """
    Parse one specification string into an `OptionDefinition`.

    Raises:
        InvalidSpecFormatError: If the text does not follow the grammar.
        UnknownArgumentTypeError: If the type token is not s, i, f or their
            long forms.
    """
    if not isinstance(spec, str):
        raise InvalidSpecFormatError(spec)
    match = SPEC_PATTERN.fullmatch(spec)
    if not match:
        raise InvalidSpecFormatError(spec)

    forms = tuple(match.group("forms").split("|"))
    modifier = match.group("modifier")

    if match.group("binding"):
        try:
            value_type = ValueType(match.group("type"))
        except ValueError:
            raise UnknownArgumentTypeError(match.group("type"), spec) from None
        return OptionDefinition(
            key=forms[0],
            kind=(
                OptionKind.REQUIRED_VALUE
                if match.group("binding") == "="
                else OptionKind.OPTIONAL_VALUE
            ),
            container=(
                ContainerShape.LIST if match.group("container") else ContainerShape.SCALAR
            ),
            value_type=value_type,
            aliases=forms,
        )
    if modifier == "!":
        return OptionDefinition(key=forms[0], kind=OptionKind.NEGATABLE, aliases=forms)
    if modifier == "+":
        return OptionDefinition(key=forms[0], kind=OptionKind.INCREMENT, aliases=forms)
    return OptionDefinition(key=forms[0], aliases=forms)


def compile_specs(specs: Iterable[str]) -> OptionTable:
    """
    Compile a list of specification strings into an `OptionTable`.

    Every spec is compiled before the table is assembled, so a bad spec fails
    the whole call.

    Args:
        specs (Iterable[str]): Specification strings, e.g. `["help", "size=i"]`.

    Returns:
        OptionTable: Lookup from every spelling to its definition.
    """
    if isinstance(specs, str):
        specs = [specs]
    definitions = [compile_spec(spec) for spec in specs]

    entries: dict[str, OptionDefinition] = {}
    declared: list[str] = []
    for definition in definitions:
        for form in definition.aliases:
            entries[form] = definition
            declared.append(form)
        negated = definition.negated_spelling
        if negated:
            entries[negated] = definition
        logger.debug(
            "Registered option '%s' (%s) as %s",
            definition.key,
            definition.kind,
            ", ".join(definition.aliases),
        )

    added = 0
    for prefix, word in abbreviations(declared).items():
        if prefix in entries:
            continue
        entries[prefix] = entries[word].as_abbreviation()
        added += 1
    logger.debug("Added %d abbreviations for %d spellings", added, len(declared))

    return OptionTable(entries, definitions)
