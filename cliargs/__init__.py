"""
Compact Command-Line Argument Declaration and Parsing.

Arguments are declared with one short string each and parsed from argv-style
tokens or a single argument line into typed values.

Usage:
    from cliargs import CliArgs

    args = CliArgs().with_schema("--name/-n=s").with_schema("--count=i?::>5")
    args.parse_argv()
    args.get_str("-n"), args.get_int("--count")
"""

from .common import CliArgsException
from .schema import ArgKind, ArgDescriptor, compile_schema
from .table import ArgTable
from .scanner import scan, split_line
from .resolve import resolve
from .access import get_values, get_value
from .parser import CliArgs, load_schemas
from .state import CliArgsConfig, load_config, dump_config
from .prompt import Question
from .steps import Step
from .errors import (
    SchemaError,
    ParseError,
    ResolutionError,
    AccessError,
    UnknownKey,
    MalformedArgument,
    ValueTypeError,
    DanglingValue,
    MissingRequiredArgument,
    TypeMismatch,
)

__all__ = [
    "CliArgs",
    "CliArgsConfig",
    "CliArgsException",
    "ArgKind",
    "ArgDescriptor",
    "ArgTable",
    "compile_schema",
    "scan",
    "split_line",
    "resolve",
    "get_values",
    "get_value",
    "load_schemas",
    "load_config",
    "dump_config",
    "Question",
    "Step",
    "SchemaError",
    "ParseError",
    "ResolutionError",
    "AccessError",
    "UnknownKey",
    "MalformedArgument",
    "ValueTypeError",
    "DanglingValue",
    "MissingRequiredArgument",
    "TypeMismatch",
]
