"""
Argument Parser.

CliArgs ties the pieces together for callers:

    args = CliArgs()
    args.with_schema("--name/-n=s") \
        .with_schema("--age/-a = i? ::> 18") \
        .with_schema("--adult=b?")
    args.parse(["-n", "Alice", "--adult"])

    args.get_str("--name")   # 'Alice'
    args.get_int("-a")       # 18
    args.get_bool("--adult") # True

Parsing always starts from empty value lists, scans, then resolves
defaults. When any step fails the values are cleared again before the error
propagates, so a failed parse never leaves partial results behind.
"""

import sys
import typing

import rich.table
from rich.markup import escape

from .common  import CliArgsException, file_load_yaml
from .printer import cons
from .schema  import ArgKind
from .table   import ArgTable
from .scanner import scan, split_line
from .resolve import resolve
from .access  import get_values, get_value
from .errors  import MissingRequiredArgument
from .state   import CliArgsConfig, CFG


def load_schemas(filepath: str) -> typing.List[str]:
    """
    Read declaration strings from a YAML file of the form:

        arguments:
          - --name/-n = s
          - --age/-a = i? ::> 18
    """
    d = file_load_yaml(filepath)

    if not isinstance(d, dict) or not isinstance(d.get("arguments"), list):
        raise CliArgsException(f'Schema file "{filepath}" must hold an "arguments" list.')

    for schema in d["arguments"]:
        if not isinstance(schema, str):
            raise CliArgsException(f'Schema file "{filepath}" lists {schema!r}, which is not a declaration string.')

    return d["arguments"]


class CliArgs:
    def __init__(self, config: CliArgsConfig = None):
        self.config   = config if config is not None else CFG()
        self.table    = ArgTable(suggest=self.config.suggest)
        self.resolved = False

    @classmethod
    def from_file(cls, filepath: str, config: CliArgsConfig = None) -> "CliArgs":
        args = cls(config)
        for schema in load_schemas(filepath):
            args.declare(schema)

        return args

    def declare(self, schema: str) -> int:
        return self.table.declare(schema)

    def with_schema(self, schema: str) -> "CliArgs":
        self.declare(schema)
        return self

    def parse(self, tokens: typing.Iterable[str]) -> "CliArgs":
        self.table.reset()
        self.resolved = False

        try:
            scan(self.table, tokens)
            resolve(self.table)
        except CliArgsException:
            self.table.reset()
            raise

        self.resolved = True

        if self.config.debug:
            self.dump()

        return self

    def parse_line(self, line: str) -> "CliArgs":
        return self.parse(split_line(line))

    def parse_argv(self, argv: typing.List[str] = None, skip_program: bool = None) -> "CliArgs":
        """ Parse the process's arguments (sys.argv when argv is None). The
            first element is treated as the program path only when
            skip_program is set, which defaults to the configuration. """
        if argv is None:
            argv = sys.argv

        if skip_program is None:
            skip_program = self.config.skip_program

        return self.parse(argv[1:] if skip_program else argv)

    def get_multi(self, key: str, kind: ArgKind) -> typing.List[typing.Any]:
        return get_values(self.table, key, kind)

    def get(self, key: str, kind: ArgKind) -> typing.Optional[typing.Any]:
        return get_value(self.table, key, kind)

    def unwrap(self, key: str, kind: ArgKind) -> typing.Any:
        value = self.get(key, kind)
        if value is None:
            raise MissingRequiredArgument(key)

        return value

    def get_bool(self, key: str) -> typing.Optional[bool]:
        return self.get(key, ArgKind.BOOL)

    def get_int(self, key: str) -> typing.Optional[int]:
        return self.get(key, ArgKind.INT)

    def get_str(self, key: str) -> typing.Optional[str]:
        return self.get(key, ArgKind.STR)

    def get_bool_multi(self, key: str) -> typing.List[bool]:
        return self.get_multi(key, ArgKind.BOOL)

    def get_int_multi(self, key: str) -> typing.List[int]:
        return self.get_multi(key, ArgKind.INT)

    def get_str_multi(self, key: str) -> typing.List[str]:
        return self.get_multi(key, ArgKind.STR)

    def unwrap_bool(self, key: str) -> bool:
        return self.unwrap(key, ArgKind.BOOL)

    def unwrap_int(self, key: str) -> int:
        return self.unwrap(key, ArgKind.INT)

    def unwrap_str(self, key: str) -> str:
        return self.unwrap(key, ArgKind.STR)

    def make_table(self) -> rich.table.Table:
        table = rich.table.Table(show_header=True, box=rich.table.box.SIMPLE)
        table.add_column("Argument", justify="left")
        table.add_column("Kind",     justify="center")
        table.add_column("Optional", justify="center")
        table.add_column("Default",  justify="left")
        table.add_column("Values",   justify="left")

        for descriptor in self.table:
            table.add_row(
                f"[magenta]{descriptor.display_name}[/magenta]",
                descriptor.kind.value,
                "Yes" if descriptor.optional else "No",
                "" if descriptor.default is None else escape(repr(descriptor.default)),
                f"[bold cyan]{escape(', '.join(repr(v) for v in descriptor.values))}[/bold cyan]",
            )

        return table

    def dump(self):
        cons.print(f"[bold]Registered names:[/bold] {self.table.names}")
        cons.print_table(self.make_table())
