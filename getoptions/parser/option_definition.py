# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionDefinition` dataclass, the compiled form of one option
specification.

One definition exists per logical option. Every declared alias and the
synthesized `no-<key>` spelling point at the same instance inside the option
table; abbreviation entries point at a copy with `abbreviated=True`.

Key Attributes:
- `key`: Canonical name, the first form listed in the spec (`verbose` in
  `verbose|v+`).
- `kind`: `OptionKind` describing what a match does.
- `container`: `ContainerShape` for argument-taking kinds.
- `value_type`: `ValueType` arguments are coerced to.
- `aliases`: Every declared form, canonical key first.
- `abbreviated`: True for synthesized unambiguous-prefix entries.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from getoptions.parser.option_kind import ContainerShape, OptionKind, ValueType


@dataclass(frozen=True)
class OptionDefinition:
    """
    Represents a compiled option specification.

    Attributes:
        key (str): Canonical name used as the result key.
        kind (OptionKind): Behaviour when the option is matched.
        container (ContainerShape): Scalar or list storage for arguments.
        value_type (ValueType): Type arguments are coerced to.
        aliases (tuple[str, ...]): Declared forms, canonical key first.
        abbreviated (bool): True if this entry is an abbreviation shortcut.
    """

    key: str
    kind: OptionKind = OptionKind.BOOLEAN
    container: ContainerShape = ContainerShape.SCALAR
    value_type: ValueType = ValueType.STRING
    aliases: tuple[str, ...] = ()
    abbreviated: bool = False

    @property
    def negated_spelling(self) -> str | None:
        """Return the `no-<key>` spelling for negatable options."""
        if self.kind is OptionKind.NEGATABLE:
            return f"no-{self.key}"
        return None

    @property
    def default(self) -> int | None:
        """Value reported for a declared option that never appeared."""
        if self.kind is OptionKind.INCREMENT:
            return 0
        return None

    def as_abbreviation(self) -> OptionDefinition:
        """Return a copy of this definition marked as an abbreviation."""
        return replace(self, abbreviated=True)

    def get_spec_text(self) -> str:
        """Rebuild the specification string this definition was compiled from."""
        forms = "|".join(self.aliases or (self.key,))
        if self.kind is OptionKind.NEGATABLE:
            return f"{forms}!"
        if self.kind is OptionKind.INCREMENT:
            return f"{forms}+"
        if self.kind.takes_argument:
            binding = "=" if self.kind is OptionKind.REQUIRED_VALUE else ":"
            container = "@" if self.container is ContainerShape.LIST else ""
            return f"{forms}{binding}{container}{self.value_type.value[0]}"
        return forms
