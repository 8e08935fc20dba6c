# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the enums that describe how a compiled option behaves.

- `OptionKind`: what happens when the option is matched (set, negate, count,
  or collect arguments).
- `ContainerShape`: whether collected arguments overwrite a scalar or
  accumulate into a list.
- `ValueType`: the type argument tokens are coerced to.

`ValueType` accepts the short spec spellings as aliases:

Example:
    ValueType("i")       → ValueType.INTEGER
    ValueType("string")  → ValueType.STRING
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    Defines the action taken when an option spelling is matched.

    Members:
        BOOLEAN: Plain flag (`help`), stores `True`.
        NEGATABLE: Flag with a `no-` form (`debug!`), stores `True` or `False`.
        INCREMENT: Counter (`verbose+`), adds one per occurrence.
        OPTIONAL_VALUE: Takes zero or more arguments (`prefix:s`).
        REQUIRED_VALUE: Takes at least one argument (`size=i`).
    """

    BOOLEAN = "boolean"
    NEGATABLE = "negatable"
    INCREMENT = "increment"
    OPTIONAL_VALUE = "optional_value"
    REQUIRED_VALUE = "required_value"

    @property
    def takes_argument(self) -> bool:
        return self in (OptionKind.OPTIONAL_VALUE, OptionKind.REQUIRED_VALUE)

    def __str__(self) -> str:
        return self.value


class ContainerShape(Enum):
    """Storage shape for argument-taking options."""

    SCALAR = "scalar"
    LIST = "list"

    def __str__(self) -> str:
        return self.value


class ValueType(Enum):
    """
    Type that argument tokens are coerced to.

    Members:
        STRING: Token is kept as is (`s`, `string`).
        INTEGER: Token is parsed as an integer (`i`, `integer`).
        FLOAT: Token is parsed as a float (`f`, `float`).
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "s": "string",
            "i": "integer",
            "f": "float",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
