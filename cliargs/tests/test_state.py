"""
Unit tests for state.py module.

Tests configuration defaults, dictionary loading, and YAML round trips.
"""

import os
import tempfile
import unittest

from ..state import CliArgsConfig, load_config, dump_config, CFG
from ..common import CliArgsException


class TestCliArgsConfig(unittest.TestCase):
    """Tests for CliArgsConfig."""

    def test_defaults(self):
        """Defaults skip the program name, suggest, and stay quiet."""
        cfg = CliArgsConfig()
        self.assertTrue(cfg.skip_program)
        self.assertTrue(cfg.suggest)
        self.assertFalse(cfg.debug)

    def test_from_dict_partial(self):
        """Missing keys keep their defaults."""
        cfg = CliArgsConfig.from_dict({"debug": True})
        self.assertTrue(cfg.debug)
        self.assertTrue(cfg.skip_program)

    def test_from_dict_none(self):
        """An empty document gives the defaults."""
        self.assertEqual(CliArgsConfig.from_dict(None), CliArgsConfig())

    def test_from_dict_unknown_key(self):
        """Unknown options are rejected."""
        with self.assertRaises(CliArgsException) as ctx:
            CliArgsConfig.from_dict({"colour": True})
        self.assertIn("colour", str(ctx.exception))

    def test_from_dict_wrong_type(self):
        """Options must be booleans."""
        with self.assertRaises(CliArgsException):
            CliArgsConfig.from_dict({"debug": "yes"})

    def test_str(self):
        """__str__ lists every option."""
        self.assertEqual(str(CliArgsConfig()), "skip_program=Yes & suggest=Yes & debug=No")

    def test_global_config(self):
        """CFG() returns the process-wide configuration."""
        self.assertIsInstance(CFG(), CliArgsConfig)


class TestConfigFiles(unittest.TestCase):
    """Tests for load_config/dump_config."""

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".yaml")
        os.close(fd)
        self.addCleanup(os.remove, self.path)

    def test_round_trip(self):
        """A dumped configuration loads back equal."""
        cfg = CliArgsConfig(skip_program=False, suggest=False, debug=True)
        dump_config(self.path, cfg)
        self.assertEqual(load_config(self.path), cfg)

    def test_not_a_mapping(self):
        """A configuration file must hold a mapping."""
        with open(self.path, "w") as f:
            f.write("- debug\n")
        with self.assertRaises(CliArgsException):
            load_config(self.path)

    def test_invalid_yaml(self):
        """Broken YAML raises CliArgsException."""
        with open(self.path, "w") as f:
            f.write("debug: [true\n")
        with self.assertRaises(CliArgsException):
            load_config(self.path)


if __name__ == "__main__":
    unittest.main()
