#!/usr/bin/env python3

"""
Declare arguments and parse an argument line against them:

    python -m cliargs --schema="--name/-n=s" --schema="--age/-a=i?::>18" \\
                      --line="-n Alice"

Values that start with a dash must use the attached --key=value form.
"""

import sys, typing

from .common  import CliArgsException, format_names
from .printer import cons
from .parser  import CliArgs
from .state   import CliArgsConfig, load_config


TOOL_SCHEMAS = [
    "--schema/-s = s?",
    "--file/-f   = s?",
    "--line/-l   = s  ::>",
    "--config/-c = s?",
    "--debug/-d  = b?",
]

FATAL_MSG = """\
Check the declarations and the argument line above. Declarations follow \
(--long|-short|--long/-short)=(b|i|s)[?][::>default].\
"""


def make_tool() -> CliArgs:
    tool = CliArgs(CliArgsConfig())
    for schema in TOOL_SCHEMAS:
        tool.declare(schema)

    return tool


def run(argv: typing.List[str] = None) -> CliArgs:
    """ Declare the requested schemas, parse the requested line against them,
        and print what was resolved. Returns the parsed target. """
    tool = make_tool().parse_argv(argv, skip_program=True)

    config_path = tool.get_str("--config")
    config = load_config(config_path) if config_path is not None else CliArgsConfig()
    if tool.get_bool("--debug"):
        config.debug = True

    file_path = tool.get_str("--file")
    target = CliArgs.from_file(file_path, config) if file_path is not None else CliArgs(config)
    for schema in tool.get_str_multi("--schema"):
        target.declare(schema)

    names = [ d.display_name for d in target.table ]
    cons.print(f"[bold]Parsing against {format_names(names, 'magenta')}[/bold]")
    cons.indent()
    target.parse_line(tool.unwrap_str("--line"))
    cons.print_table(target.make_table())
    cons.unindent()

    return target


def main(argv: typing.List[str] = None):
    try:
        run(argv)
    except CliArgsException as exc:
        cons.fatal(exc, FATAL_MSG)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
