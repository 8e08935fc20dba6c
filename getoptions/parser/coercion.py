# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion for option arguments.

`coerce()` never raises for bad input. It returns a `Coercion` result that is
either successful (carries the typed value) or failed (carries a reason), and
the matcher decides how to report a failure.

Functions:
- coerce_integer: Convert a token to an int.
- coerce_float: Convert a token to a finite float.
- coerce: Dispatch on `ValueType` and wrap the outcome in a `Coercion`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from getoptions.parser.option_kind import ValueType


@dataclass(frozen=True)
class Coercion:
    """Outcome of converting one argument token."""

    token: str
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def coerce_integer(token: str) -> int:
    """
    Convert a string to an integer.

    Accepts Python integer literals (`42`, `-7`, `0x1f`, `0o17`, `0b101`,
    `1_000`) and decimal text with leading zeros (`007`).

    Raises:
        ValueError: If the token is not an integer.
    """
    try:
        return int(token, 0)
    except ValueError:
        return int(token, 10)


def coerce_float(token: str) -> float:
    """
    Convert a string to a finite float.

    Raises:
        ValueError: If the token is not a number, or spells NaN or infinity.
    """
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Value '{token}' is not a finite number")
    return value


def coerce(token: str, value_type: ValueType) -> Coercion:
    """
    Attempt to convert an argument token to the given value type.

    Args:
        token (str): The raw argument token.
        value_type (ValueType): The declared argument type.

    Returns:
        Coercion: Successful result with `value`, or failed result with `error`.
    """
    if value_type is ValueType.STRING:
        return Coercion(token, token)
    try:
        if value_type is ValueType.INTEGER:
            return Coercion(token, coerce_integer(token))
        return Coercion(token, coerce_float(token))
    except (TypeError, ValueError) as error:
        return Coercion(token, error=str(error))
