"""
Argument Schema Definitions.

This module defines the dataclasses describing a declared argument and the
compiler that builds one from a compact declaration string:

    --long/-short = kind [?] [::> default]

- ArgKind:       the closed set of value kinds (b, i, s)
- ArgDescriptor: one declared argument (names, kind, optionality, default)
                 plus the values observed for it while scanning
- compile_schema(): declaration string -> ArgDescriptor

Examples:
    compile_schema("--name/-n=s")           # required string
    compile_schema("--age/-a = i? ::> 18")  # optional integer, defaults to 18
    compile_schema("--verbose/-v=b?")       # optional presence flag
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Any

from .errors import SchemaError


INT_LITERAL_RE = re.compile(r'[+-]?[0-9]+')

DEFAULT_SEPARATOR = "::>"

# Whitespace is stripped before matching, so no \s anywhere below.
SCHEMA_RE = re.compile(
    r'^(?:'
    r'(?P<long>--\w[\w-]*)(?:/(?P<short>-\w[\w-]*))?'
    r'|(?P<short_only>-\w[\w-]*)'
    r')=(?P<kind>[bis])(?P<optional>\?)?$'
)


class ArgKind(Enum):
    """
    Value kinds an argument can be declared with.

    - BOOL: presence only; a flag records True each time it appears
    - INT:  base-10 signed integers
    - STR:  raw token text
    """
    BOOL = "b"
    INT = "i"
    STR = "s"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return {
            ArgKind.BOOL: "a boolean",
            ArgKind.INT: "an integer",
            ArgKind.STR: "a string",
        }[self]

    @property
    def python_type(self) -> type:
        return {
            ArgKind.BOOL: bool,
            ArgKind.INT: int,
            ArgKind.STR: str,
        }[self]

    def parse(self, text: str) -> Any:
        """
        Parse a literal into a value of this kind.

        Raises:
            ValueError: If text is not a valid literal for this kind.
        """
        if self is ArgKind.BOOL:
            if text == "true":
                return True
            if text == "false":
                return False
            raise ValueError(f"invalid boolean literal {text!r}")

        if self is ArgKind.INT:
            if not INT_LITERAL_RE.fullmatch(text):
                raise ValueError(f"invalid integer literal {text!r}")
            return int(text)

        return text

    def accepts(self, value: Any) -> bool:
        """Return True if value is a Python value of this kind."""
        if self is ArgKind.INT:
            # bool is a subclass of int, keep them apart
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, self.python_type)

    @staticmethod
    def from_code(code: str) -> "ArgKind":
        for kind in ArgKind:
            if kind.value == code:
                return kind
        raise ValueError(f"unknown kind code {code!r}")


@dataclass
class ArgDescriptor:
    """
    Definition of a single declared argument.

    Attributes:
        long_name: Long form with dashes (e.g., "--verbose"), or None
        short_name: Short form with dash (e.g., "-v"), or None
        kind: Value kind (BOOL, INT, STR)
        optional: If True, receiving no value is acceptable
        default: Value substituted when none was observed (None means no default)
        values: Values observed while scanning, in input order
    """
    kind: ArgKind
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    optional: bool = False
    default: Any = None
    values: List[Any] = field(default_factory=list)

    def __post_init__(self):
        if self.long_name is None and self.short_name is None:
            raise ValueError("ArgDescriptor needs a long_name or a short_name")

    @property
    def names(self) -> List[str]:
        """Registered names, long form first."""
        return [n for n in (self.long_name, self.short_name) if n is not None]

    @property
    def display_name(self) -> str:
        return "/".join(self.names)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_required(self) -> bool:
        """Required arguments fail resolution when nothing was observed."""
        return not self.optional and not self.has_default

    def add(self, value: Any) -> None:
        """Append an observed value, enforcing the declared kind."""
        if not self.kind.accepts(value):
            raise TypeError(f"{self.display_name} holds {self.kind.label}, got {value!r}")
        self.values.append(value)

    def clear(self) -> None:
        self.values.clear()


def compile_schema(schema: str) -> ArgDescriptor:
    """
    Compile a declaration string into an ArgDescriptor.

    Whitespace in the name/kind part is ignored. The default literal, when
    present, is trimmed and parsed against the declared kind right away.

    Args:
        schema: Declaration such as "--name/-n = s? ::> anonymous"

    Returns:
        A fresh ArgDescriptor with no observed values.

    Raises:
        SchemaError: If the declaration does not match the grammar or its
            default literal does not parse as the declared kind.
    """
    if not isinstance(schema, str):
        raise SchemaError(schema, "declaration must be a string")

    head, sep, literal = schema.partition(DEFAULT_SEPARATOR)
    head = "".join(head.split())

    if not head:
        raise SchemaError(schema, "declaration is empty")

    match = SCHEMA_RE.match(head)
    if match is None:
        raise SchemaError(schema, "expected (--long|-short|--long/-short)=(b|i|s)[?][::>default]")

    kind = ArgKind.from_code(match.group("kind"))

    default = None
    if sep:
        literal = literal.strip()
        try:
            default = kind.parse(literal)
        except ValueError as exc:
            raise SchemaError(schema, f"default {literal!r} is not {kind.label}") from exc

    return ArgDescriptor(
        kind=kind,
        long_name=match.group("long"),
        short_name=match.group("short") or match.group("short_only"),
        optional=match.group("optional") is not None,
        default=default,
    )
