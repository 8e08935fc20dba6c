# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by GetOptions.

Every failure, whether it comes from compiling option specifications, matching
the token stream, or reading results back, is a `ParseError`. The subclasses
give callers a way to tell the failure kinds apart without parsing messages.

Exception Hierarchy:
- GetOptionsError
    ├── ParseError
    │   ├── SpecError
    │   │   ├── InvalidSpecFormatError
    │   │   └── UnknownArgumentTypeError
    │   ├── UnknownOptionError
    │   ├── MissingRequiredArgumentError
    │   ├── TypeCoercionError
    │   └── AccessError
    │       ├── NilKeyAccessError
    │       └── UnknownOptionAccessError
    └── ConfigError
"""
from __future__ import annotations


class GetOptionsError(Exception):
    """Base exception for the GetOptions package."""


class ParseError(GetOptionsError):
    """Raised for any option specification, parsing, or lookup failure."""


class SpecError(ParseError):
    """Raised when an option specification cannot be compiled."""

    def __init__(self, message: str, spec: object = None):
        super().__init__(message)
        self.spec = spec


class InvalidSpecFormatError(SpecError):
    """Raised when a specification string does not follow the grammar."""

    def __init__(self, spec: object):
        super().__init__(f"invalid option format for '{spec}'", spec)


class UnknownArgumentTypeError(SpecError):
    """Raised when a specification names an argument type that does not exist."""

    def __init__(self, type_token: str, spec: object = None):
        super().__init__(f"unknown argument type '{type_token}'", spec)
        self.type_token = type_token


class UnknownOptionError(ParseError):
    """Raised when an option token matches no known spelling."""

    def __init__(self, option: str, candidates: list[str] | None = None):
        self.option = option
        self.candidates = list(candidates or [])
        super().__init__(f"unknown option '{option}'{self._hint()}")

    def _hint(self) -> str:
        if not self.candidates:
            return ""
        if len(self.candidates) == 1:
            return f", did you mean {self.candidates[0]}?"
        return (
            ", close matches are: "
            + ", ".join(self.candidates[:-1])
            + " and "
            + self.candidates[-1]
        )


class MissingRequiredArgumentError(ParseError):
    """Raised when an option declared with `=` received no argument."""

    def __init__(self, key: str):
        super().__init__(f"missing required argument for '{key}'")
        self.key = key


class TypeCoercionError(ParseError):
    """Raised when an argument token cannot be converted to the declared type."""

    def __init__(self, key: str, value_type: object, token: str):
        super().__init__(f"expecting {value_type} value for option '{key}'")
        self.key = key
        self.value_type = value_type
        self.token = token


class AccessError(ParseError):
    """Raised when parsed results are read back incorrectly."""


class NilKeyAccessError(AccessError):
    """Raised when `None` or an empty string is used as an option key."""

    def __init__(self) -> None:
        super().__init__("`None' cannot be an option key")


class UnknownOptionAccessError(AccessError):
    """Raised when reading an option that was never declared."""

    def __init__(self, key: str):
        super().__init__(f"program tried to access an unknown option: {key!r}")
        self.key = key


class ConfigError(GetOptionsError):
    """Raised when a spec file cannot be found, read, or validated."""
