"""
GetOptions

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    GetOptionsError,
    InvalidSpecFormatError,
    MissingRequiredArgumentError,
    NilKeyAccessError,
    ParseError,
    TypeCoercionError,
    UnknownArgumentTypeError,
    UnknownOptionAccessError,
    UnknownOptionError,
)
from .get_options import GetOptions

__all__ = [
    "GetOptions",
    "GetOptionsError",
    "ParseError",
    "InvalidSpecFormatError",
    "UnknownArgumentTypeError",
    "UnknownOptionError",
    "MissingRequiredArgumentError",
    "TypeCoercionError",
    "NilKeyAccessError",
    "UnknownOptionAccessError",
]
