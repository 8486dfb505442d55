"""
Shared pieces: the root exception, YAML files for schemas and configuration,
and the English listing of argument names used in console output.
"""

import typing

import yaml


class CliArgsException(Exception):
    pass


def file_load_yaml(filepath: str) -> typing.Any:
    """ Load a YAML document. An empty file reads as an empty mapping. """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            d = yaml.safe_load(f)
    except (IOError, yaml.YAMLError) as exc:
        raise CliArgsException(f'Failed to load YAML from "{filepath}": {exc}') from exc

    return {} if d is None else d


def file_dump_yaml(filepath: str, data) -> None:
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)
    except (IOError, yaml.YAMLError) as exc:
        raise CliArgsException(f'Failed to dump YAML to "{filepath}": {exc}.') from exc


def format_names(names: typing.Sequence[str], style: str = None, empty: str = "no arguments") -> str:
    """ List argument names for the console: "--a", "--a and --b",
        "--a, --b, and --c". Each name is wrapped in rich markup when a
        style is given. """
    pre, post = ("", "") if style is None else (f"[{style}]", f"[/{style}]")
    items = [f"{pre}{name}{post}" for name in names]

    if not items:
        return f"{pre}{empty}{post}"

    if len(items) <= 2:
        return " and ".join(items)

    return f"{', '.join(items[:-1])}, and {items[-1]}"
