"""
Typed Access to Parsed Values.

Reads are checked against the declared kind: asking for an integer from a
string argument is a TypeMismatch, not a conversion. An argument that simply
has no value (optional, no default) reads as an empty list or None.
"""

from typing import Any, List, Optional

from .schema import ArgKind
from .table import ArgTable
from .errors import TypeMismatch


def get_values(table: ArgTable, key: str, kind: ArgKind) -> List[Any]:
    """
    Get every value parsed for key.

    Args:
        table: The parsed argument table.
        key: Any registered name of the argument ("--name" or "-n").
        kind: The kind the caller expects.

    Returns:
        A copy of the values, in input order.

    Raises:
        UnknownKey: If key is not registered.
        TypeMismatch: If the argument was declared with another kind.
    """
    descriptor = table.lookup(key)
    if descriptor.kind is not kind:
        raise TypeMismatch(key, descriptor.kind.label, kind.label)

    return list(descriptor.values)


def get_value(table: ArgTable, key: str, kind: ArgKind) -> Optional[Any]:
    """Get the first value parsed for key, or None if there is none."""
    values = get_values(table, key, kind)
    return values[0] if values else None
