"""
Token Scanner.

Walks a sequence of argv-style tokens left to right and routes values into
an ArgTable. Each token is one of:

- long key:  --name or --name=value (the value travels in the same token)
- short key: -name (a non-boolean short key takes the next token as value)
- value:     anything else, bound to the short key awaiting a value

    table.declare("--name/-n=s")
    scan(table, ["-n", "Alice", "--name=Bob"])
    table.lookup("--name").values   # ['Alice', 'Bob']

Scanning stops at the first failure; tokens after it are never applied.
"""

import re
import shlex
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from .schema import ArgDescriptor, ArgKind
from .table import ArgTable
from .errors import DanglingValue, MalformedArgument, ValueTypeError


NEGATIVE_INT_RE = re.compile(r'^-[0-9]+$')


class TokenType(Enum):
    LONG_KEY = auto()
    SHORT_KEY = auto()
    VALUE = auto()


def classify(token: str) -> TokenType:
    """Return the kind of token (a lone "-" counts as a value)."""
    if token.startswith("--"):
        return TokenType.LONG_KEY
    if token.startswith("-") and len(token) > 1:
        return TokenType.SHORT_KEY
    return TokenType.VALUE


def split_long(token: str) -> Tuple[str, Optional[str]]:
    """
    Split "--name=value" into ("--name", "value").

    The value is None when the token carries no "=" at all, and "" for
    "--name=".
    """
    key, sep, value = token.partition("=")
    return key, (value if sep else None)


def split_line(line: str) -> List[str]:
    """
    Split a single argument line into tokens with POSIX shell quoting.

    Raises:
        MalformedArgument: If the line has an unterminated quote or a
            dangling escape.
    """
    try:
        return shlex.split(line, posix=True)
    except ValueError as exc:
        raise MalformedArgument(None, f"Cannot split argument line {line!r}: {exc}") from exc


def _append(descriptor: ArgDescriptor, key: str, text: str) -> None:
    try:
        value = descriptor.kind.parse(text)
    except ValueError as exc:
        raise ValueTypeError(key, descriptor.kind.label, text) from exc

    descriptor.add(value)


def _takes_as_value(table: ArgTable, awaiting: Optional[ArgDescriptor], token: str) -> bool:
    """A short-looking token is a negative number when an int key awaits it."""
    return (
        awaiting is not None
        and awaiting.kind is ArgKind.INT
        and NEGATIVE_INT_RE.match(token) is not None
        and token not in table
    )


def scan(table: ArgTable, tokens: Iterable[str]) -> None:
    """
    Consume every token, appending parsed values to the table's descriptors.

    The only state is the short key awaiting a value:

    - Boolean short keys and long keys are applied on the spot and leave a
      waiting key untouched, so "-n -v Alice" gives -v True and -n "Alice".
    - A non-boolean short key becomes the waiting key, replacing any
      previous one.
    - A value token feeds the waiting key and clears it. While an integer
      key waits, "-<digits>" is a negative value unless it is itself a
      registered name.
    - A key still waiting at the end of input receives nothing; resolve()
      then applies its optional/default policy.

    Args:
        table: Declared arguments; their value lists are appended to.
        tokens: The tokens to scan, program name already removed.

    Raises:
        UnknownKey: A key token names no declared argument.
        MalformedArgument: A boolean long key carries "=value".
        ValueTypeError: A value does not parse as its argument's kind.
        DanglingValue: A value token has no key awaiting it.
    """
    awaiting: Optional[ArgDescriptor] = None
    awaiting_key: Optional[str] = None

    for token in tokens:
        token_type = classify(token)

        if token_type is TokenType.SHORT_KEY and _takes_as_value(table, awaiting, token):
            token_type = TokenType.VALUE

        if token_type is TokenType.LONG_KEY:
            key, text = split_long(token)
            descriptor = table.lookup(key)
            if descriptor.kind is ArgKind.BOOL:
                if text is not None:
                    raise MalformedArgument(key, f"'{key}' is a flag and takes no value, got '{token}'")
                descriptor.add(True)
            else:
                _append(descriptor, key, text if text is not None else "")

        elif token_type is TokenType.SHORT_KEY:
            descriptor = table.lookup(token)
            if descriptor.kind is ArgKind.BOOL:
                descriptor.add(True)
            else:
                awaiting, awaiting_key = descriptor, token

        else:
            if awaiting is None:
                raise DanglingValue(token)
            _append(awaiting, awaiting_key, token)
            awaiting, awaiting_key = None, None
