"""
GetOptions

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .abbrev import abbreviations
from .coercion import Coercion, coerce
from .matcher import OptionMatcher, ParseResult
from .option_definition import OptionDefinition
from .option_kind import ContainerShape, OptionKind, ValueType
from .option_table import OptionTable
from .spec_compiler import compile_spec, compile_specs

__all__ = [
    "abbreviations",
    "coerce",
    "compile_spec",
    "compile_specs",
    "Coercion",
    "ContainerShape",
    "OptionDefinition",
    "OptionKind",
    "OptionMatcher",
    "OptionTable",
    "ParseResult",
    "ValueType",
]
