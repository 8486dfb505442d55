"""
Argument Table.

Ordered storage for the arguments declared on one parser. Every registered
name (long and short) maps to the position of its descriptor, so both
spellings of an argument share one value list.

    table = ArgTable()
    table.declare("--verbose/-v=b?")
    table.lookup("-v") is table.lookup("--verbose")   # True

Descriptors are appended in declaration order and never removed. After
construction only their observed values change; reset() clears them so the
table can be scanned again.
"""

from typing import Dict, Iterator, List, Optional

from .schema import ArgDescriptor, compile_schema
from .errors import SchemaError, UnknownKey
from .suggest import suggest_names


class ArgTable:
    """
    Declared arguments plus a name -> index mapping.

    Attributes:
        _args: Descriptors in declaration order.
        _index: Maps every registered name to its descriptor's position.
        suggest: Whether UnknownKey errors carry "did you mean?" hints.
    """

    def __init__(self, suggest: bool = True):
        self._args: List[ArgDescriptor] = []
        self._index: Dict[str, int] = {}
        self.suggest = suggest

    def declare(self, schema: str) -> int:
        """
        Compile a declaration string and register the result.

        Returns:
            The position of the new descriptor.

        Raises:
            SchemaError: If the declaration does not compile or one of its
                names is already registered.
        """
        return self.register(compile_schema(schema), source=schema)

    def register(self, descriptor: ArgDescriptor, source: Optional[str] = None) -> int:
        """Register an already compiled descriptor under each of its names."""
        for name in descriptor.names:
            if name in self._index:
                raise SchemaError(source or descriptor.display_name, f"'{name}' is already declared")

        index = len(self._args)
        self._args.append(descriptor)
        for name in descriptor.names:
            self._index[name] = index

        return index

    def lookup(self, name: str) -> ArgDescriptor:
        """
        Get the descriptor registered under name.

        Raises:
            UnknownKey: If no descriptor uses this name.
        """
        index = self._index.get(name)
        if index is None:
            suggestions = suggest_names(name, self._index.keys()) if self.suggest else []
            raise UnknownKey(name, suggestions)

        return self._args[index]

    def reset(self) -> None:
        """Clear every descriptor's observed values."""
        for descriptor in self._args:
            descriptor.clear()

    @property
    def names(self) -> Dict[str, int]:
        """A copy of the name -> index mapping."""
        return dict(self._index)

    @property
    def descriptors(self) -> List[ArgDescriptor]:
        return list(self._args)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[ArgDescriptor]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)
