import typing

import rich, rich.console, rich.table
from rich.markup import escape


class CliArgsPrinter:
    def __init__(self):
        self.stack = []
        self.raw   = rich.console.Console()

    def reset(self):
        self.stack = []

    def indent(self, msg: str = None):
        self.stack.append(msg if msg is not None else "  ")

    def unindent(self, times: int = 1):
        for _ in range(times):
            self.stack.pop()

    def print(self, msg: typing.Any = "", **kwargs):
        prefix = ''.join(self.stack)
        lines  = str(msg).split('\n')
        self.raw.print('\n'.join(f"{prefix}{line}" for line in lines), soft_wrap=True, **kwargs)

    def print_table(self, table: rich.table.Table):
        self.raw.print(table)

    def fatal(self, exc: Exception, hint: str):
        """ Print an error banner; the exception text is shown verbatim. """
        self.reset()
        self.print(f"""
--- [bold red]FATAL CLIARGS ERROR[/bold red] ---

{escape(str(exc))}
{hint}
""")


cons = CliArgsPrinter()
