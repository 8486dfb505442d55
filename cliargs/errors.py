"""
Argument Errors and Consistent Message Formatting.

Every failure raised while declaring, scanning, resolving, or reading
arguments is a subclass of CliArgsException. The hierarchy groups them by
the phase that raises them:

- SchemaError:     declaration time (bad grammar, bad default, duplicate name)
- ParseError:      scan time (UnknownKey, MalformedArgument, ValueTypeError,
                   DanglingValue)
- ResolutionError: after scanning (MissingRequiredArgument)
- AccessError:     read time (TypeMismatch, UnknownKey)

Error Message Format
--------------------
- Key names in single quotes: '--name'
- Clear description of the problem
- Current value if relevant: got <value>
- Expected kind if relevant: expected <kind>

Examples:
- "'--age' expects an integer, got 'abc'"
- "Unknown argument '--nmae'. Did you mean '--name'?"
- "Missing required argument '--name/-n'"
"""

from typing import Any, List, Optional

from .common import CliArgsException


def format_key(name: str) -> str:
    """Format an argument name for error messages."""
    return f"'{name}'"


def format_value(value: Any) -> str:
    """Format a value for error messages."""
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def unknown_key_error(key: str, suggestions: Optional[List[str]] = None) -> str:
    """
    Create an error message for an unregistered argument name.

    Args:
        key: The name that was not found.
        suggestions: Similar registered names, best first.

    Returns:
        Formatted error message with a "did you mean?" hint when available.
    """
    msg = f"Unknown argument {format_key(key)}"
    if not suggestions:
        return msg
    if len(suggestions) == 1:
        return f"{msg}. Did you mean {format_key(suggestions[0])}?"
    quoted = ", ".join(format_key(s) for s in suggestions)
    return f"{msg}. Did you mean one of: {quoted}?"


def type_error(key: str, expected_kind: str, got: Any) -> str:
    """Create a value-kind mismatch message."""
    return f"{format_key(key)} expects {expected_kind}, got {format_value(got)}"


def schema_error(schema: Any, reason: str) -> str:
    """Create a declaration failure message."""
    return f"Invalid argument declaration {format_value(schema)}: {reason}"


class SchemaError(CliArgsException):
    """Raised when a declaration string does not compile."""

    def __init__(self, schema: Any, reason: str):
        self.schema = schema
        self.reason = reason
        super().__init__(schema_error(schema, reason))


class KeyedError(CliArgsException):
    """An error about one argument name (None for bare values)."""

    def __init__(self, key: Optional[str], message: str):
        self.key = key
        super().__init__(message)


class ParseError(KeyedError):
    """Base class for failures raised while scanning tokens."""


class AccessError(KeyedError):
    """Base class for failures raised while reading parsed values."""


class ResolutionError(KeyedError):
    """Base class for failures raised after scanning completes."""


class UnknownKey(ParseError, AccessError):
    """A token or a lookup named an argument that was never declared."""

    def __init__(self, key: str, suggestions: Optional[List[str]] = None):
        self.suggestions = list(suggestions or [])
        super().__init__(key, unknown_key_error(key, self.suggestions))


class MalformedArgument(ParseError):
    """A token is structurally invalid for the argument it names."""


class ValueTypeError(ParseError):
    """A value token does not parse as its argument's kind."""

    def __init__(self, key: str, expected_kind: str, got: str):
        self.expected_kind = expected_kind
        self.got = got
        super().__init__(key, type_error(key, expected_kind, got))


class DanglingValue(ParseError):
    """A bare value appeared with no key waiting for it."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(None, f"Value {format_value(value)} does not follow an argument that takes a value")


class MissingRequiredArgument(ResolutionError):
    """A required argument without a default received no value."""

    def __init__(self, key: str):
        super().__init__(key, f"Missing required argument {format_key(key)}")


class TypeMismatch(AccessError):
    """A typed read asked for a kind the argument was not declared with."""

    def __init__(self, key: str, declared: str, requested: str):
        self.declared  = declared
        self.requested = requested
        super().__init__(key, f"{format_key(key)} is declared as {declared}, not {requested}")
