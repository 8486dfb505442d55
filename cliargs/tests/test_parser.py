"""
Unit tests for parser.py and access.py modules.

Tests the CliArgs facade end to end: declaring, parsing, resolving, and
typed reads.
"""

import os
import tempfile
import unittest

import rich.console

from ..parser import CliArgs, load_schemas
from ..schema import ArgKind
from ..state import CliArgsConfig
from ..printer import cons
from ..common import CliArgsException
from ..errors import (
    UnknownKey,
    TypeMismatch,
    ValueTypeError,
    DanglingValue,
    MissingRequiredArgument,
    SchemaError,
)


class TestCliArgs(unittest.TestCase):
    """Tests for parsing through CliArgs."""

    def setUp(self):
        self.args = CliArgs(CliArgsConfig())
        self.args.with_schema("--name/-n=s") \
                 .with_schema("--age/-a = i? ::> 18") \
                 .with_schema("--adult=b?")

    def test_typical_use(self):
        """Declared arguments are readable by either name after parsing."""
        self.args.parse(["-n", "Alice", "--adult"])
        self.assertEqual(self.args.get_str("--name"), "Alice")
        self.assertEqual(self.args.get_int("-a"), 18)
        self.assertIs(self.args.get_bool("--adult"), True)
        self.assertTrue(self.args.resolved)

    def test_optional_without_default_reads_empty(self):
        """Absent optional values are empty, not errors."""
        self.args.parse(["-n", "Alice"])
        self.assertEqual(self.args.get_bool_multi("--adult"), [])
        self.assertIsNone(self.args.get_bool("--adult"))

    def test_multi_values(self):
        """Repeated keys read back in input order."""
        self.args.parse(["-n", "Alice", "-n", "Bob"])
        self.assertEqual(self.args.get_str_multi("-n"), ["Alice", "Bob"])
        self.assertEqual(self.args.get_str("-n"), "Alice")

    def test_get_multi_returns_copy(self):
        """Changing a returned list does not change parsed values."""
        self.args.parse(["-n", "Alice"])
        self.args.get_str_multi("-n").append("Mallory")
        self.assertEqual(self.args.get_str_multi("-n"), ["Alice"])

    def test_missing_required(self):
        """A required argument without default must be given."""
        with self.assertRaises(MissingRequiredArgument):
            self.args.parse(["--adult"])

    def test_failed_parse_leaves_no_values(self):
        """A failed parse clears whatever was scanned before the error."""
        with self.assertRaises(DanglingValue):
            self.args.parse(["-n", "Alice", "stray"])
        self.assertEqual(self.args.get_str_multi("-n"), [])
        self.assertFalse(self.args.resolved)

    def test_reparse_starts_fresh(self):
        """Parsing again does not keep values from the previous parse."""
        self.args.parse(["-n", "Alice", "-a", "30"])
        self.args.parse(["-n", "Bob"])
        self.assertEqual(self.args.get_str_multi("-n"), ["Bob"])
        self.assertEqual(self.args.get_int_multi("-a"), [18])

    def test_parse_line(self):
        """An argument line is split with shell quoting."""
        self.args.parse_line('-n "Jane Doe" --age=41')
        self.assertEqual(self.args.get_str("--name"), "Jane Doe")
        self.assertEqual(self.args.get_int("--age"), 41)

    def test_flag_between_short_key_and_value(self):
        """A boolean short flag may sit between a short key and its value."""
        self.args.declare("--verbose/-v=b?")
        self.args.parse(["-n", "-v", "Alice"])
        self.assertEqual(self.args.get_str("-n"), "Alice")
        self.assertEqual(self.args.get_bool_multi("--verbose"), [True])

    def test_trailing_optional_short_key(self):
        """An optional short key at the end of input resolves as absent."""
        args = CliArgs(CliArgsConfig())
        args.declare("--count/-c=i?")
        args.parse(["-c"])
        self.assertEqual(args.get_int_multi("-c"), [])

    def test_trailing_short_key_with_default(self):
        """A short key left without a value falls back to its default."""
        self.args.parse(["-n", "Alice", "-a"])
        self.assertEqual(self.args.get_int_multi("--age"), [18])

    def test_trailing_required_short_key(self):
        """A required short key left without a value is missing."""
        with self.assertRaises(MissingRequiredArgument):
            self.args.parse(["--adult", "-n"])

    def test_value_type_error(self):
        """Bad integer values surface as ValueTypeError."""
        with self.assertRaises(ValueTypeError):
            self.args.parse(["-n", "Alice", "--age=notanumber"])


class TestAccessErrors(unittest.TestCase):
    """Tests for typed reads."""

    def setUp(self):
        self.args = CliArgs(CliArgsConfig())
        self.args.declare("--count=i?::>5")
        self.args.parse([])

    def test_default_round_trip(self):
        """An unobserved argument reads back its default."""
        self.assertEqual(self.args.get_int("--count"), 5)
        self.assertEqual(self.args.get("--count", ArgKind.INT), 5)
        self.assertEqual(self.args.get_multi("--count", ArgKind.INT), [5])

    def test_type_mismatch(self):
        """Reading with the wrong kind fails."""
        with self.assertRaises(TypeMismatch) as ctx:
            self.args.get_str("--count")
        self.assertEqual(ctx.exception.key, "--count")

    def test_unknown_key(self):
        """Reading an undeclared name fails."""
        with self.assertRaises(UnknownKey):
            self.args.get_int("--total")

    def test_unwrap(self):
        """unwrap returns the first value or raises when there is none."""
        self.assertEqual(self.args.unwrap_int("--count"), 5)
        self.args.declare("--label=s?")
        self.args.parse([])
        with self.assertRaises(MissingRequiredArgument):
            self.args.unwrap_str("--label")

    def test_verbose_alias(self):
        """Long and short names read the same presence value."""
        args = CliArgs(CliArgsConfig())
        args.declare("--verbose/-v=b?")
        args.parse(["-v"])
        self.assertEqual(args.get_bool_multi("--verbose"), [True])
        self.assertEqual(args.get_bool_multi("-v"), [True])
        self.assertTrue(args.unwrap_bool("-v"))


class TestParseArgv(unittest.TestCase):
    """Tests for parse_argv()."""

    def test_skip_program(self):
        """The first element is skipped when skip_program is set."""
        args = CliArgs(CliArgsConfig())
        args.declare("--verbose/-v=b?")
        args.parse_argv(["prog", "-v"], skip_program=True)
        self.assertTrue(args.get_bool("-v"))

    def test_no_skip_program(self):
        """Without skipping, the program path is just another token."""
        args = CliArgs(CliArgsConfig())
        args.declare("--verbose/-v=b?")
        with self.assertRaises(DanglingValue):
            args.parse_argv(["prog", "-v"], skip_program=False)

    def test_skip_program_from_config(self):
        """skip_program defaults to the configuration."""
        args = CliArgs(CliArgsConfig(skip_program=False))
        args.declare("--verbose/-v=b?")
        args.parse_argv(["-v"])
        self.assertTrue(args.get_bool("--verbose"))


class TestSchemaFiles(unittest.TestCase):
    """Tests for loading declarations from YAML."""

    def _write(self, content: str) -> str:
        fd, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(fd, "w") as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_from_file(self):
        """Declarations are read in order from the arguments list."""
        path = self._write("arguments:\n  - \"--name/-n = s\"\n  - \"--jobs/-j = i ::> 1\"\n")
        args = CliArgs.from_file(path, CliArgsConfig())
        args.parse(["-n", "x"])
        self.assertEqual(args.get_int("-j"), 1)
        self.assertEqual([d.display_name for d in args.table], ["--name/-n", "--jobs/-j"])

    def test_missing_arguments_list(self):
        """Files without an arguments list are rejected."""
        path = self._write("other: 1\n")
        with self.assertRaises(CliArgsException):
            load_schemas(path)

    def test_non_string_entry(self):
        """Every entry must be a declaration string."""
        path = self._write("arguments:\n  - 5\n")
        with self.assertRaises(CliArgsException):
            load_schemas(path)

    def test_bad_declaration_in_file(self):
        """Bad declarations fail while building the parser."""
        path = self._write("arguments:\n  - name = s\n")
        with self.assertRaises(SchemaError):
            CliArgs.from_file(path, CliArgsConfig())

    def test_missing_file(self):
        """Unreadable files raise CliArgsException."""
        with self.assertRaises(CliArgsException):
            load_schemas("/nonexistent/cliargs/schema.yaml")


class TestDebugDump(unittest.TestCase):
    """Tests for the debug table."""

    def setUp(self):
        raw = cons.raw
        cons.raw = rich.console.Console(color_system=None, width=200)
        self.addCleanup(setattr, cons, "raw", raw)

    def test_debug_config_dumps_after_parse(self):
        """With debug set, a successful parse prints names and values."""
        args = CliArgs(CliArgsConfig(debug=True))
        args.declare("--name/-n=s")
        with cons.raw.capture() as capture:
            args.parse(["-n", "Alice"])
        output = capture.get()
        self.assertIn("Registered names:", output)
        self.assertIn("--name/-n", output)
        self.assertIn("'Alice'", output)

    def test_no_dump_without_debug(self):
        """Without debug, parsing prints nothing."""
        args = CliArgs(CliArgsConfig())
        args.declare("--name/-n=s")
        with cons.raw.capture() as capture:
            args.parse(["-n", "Alice"])
        self.assertEqual(capture.get(), "")


    def test_make_table_has_a_row_per_argument(self):
        """The rich table lists every declared argument."""
        args = CliArgs(CliArgsConfig())
        args.declare("--name/-n=s::>[x]")
        args.declare("--verbose=b?")
        args.parse([])
        table = args.make_table()
        self.assertEqual(table.row_count, 2)
        self.assertEqual(len(table.columns), 5)


if __name__ == "__main__":
    unittest.main()
