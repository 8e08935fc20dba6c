# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionTable`, the read-only lookup from every recognized spelling to
its `OptionDefinition`.

Spellings include declared forms, `no-<key>` negations, and synthesized
abbreviations. The table also resolves unknown spellings into suggestion
candidates for `UnknownOptionError`.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping

from getoptions.parser.option_definition import OptionDefinition


class OptionTable(Mapping[str, OptionDefinition]):
    """
    Read-only mapping of spelling to `OptionDefinition`.

    Iteration follows registration order: declared forms in spec order, then
    negated forms, then abbreviations.
    """

    def __init__(
        self,
        entries: Mapping[str, OptionDefinition] | None = None,
        definitions: list[OptionDefinition] | None = None,
    ) -> None:
        self._entries: dict[str, OptionDefinition] = dict(entries or {})
        self._definitions: list[OptionDefinition] = list(definitions or [])

    def __getitem__(self, spelling: str) -> OptionDefinition:
        return self._entries[spelling]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def definitions(self) -> list[OptionDefinition]:
        """One definition per declared option, in spec order."""
        return list(self._definitions)

    def canonical_key(self, spelling: str) -> str | None:
        """Return the canonical key a spelling resolves to, if any."""
        definition = self._entries.get(spelling)
        return definition.key if definition else None

    def suggest(self, name: str) -> list[str]:
        """
        Return declared spellings that start with `name`.

        Abbreviation entries are skipped so the suggestions only show spellings
        a user would have typed in full.
        """
        return [
            spelling
            for spelling, definition in self._entries.items()
            if not definition.abbreviated and spelling.startswith(name)
        ]

    def __str__(self) -> str:
        abbreviated = sum(definition.abbreviated for definition in self._entries.values())
        return (
            f"OptionTable(options={len(self._definitions)}, "
            f"spellings={len(self._entries)}, abbreviations={abbreviated})"
        )

    def __repr__(self) -> str:
        return str(self)
