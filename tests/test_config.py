import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import yaml

from mud.config import DEFAULTS, load_config


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp, "config.yaml")

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def write(self, text):
        with open(self.path, "w") as f:
            f.write(text)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_creates_default_file(self):
        config = load_config(self.path)
        self.assertTrue(os.path.exists(self.path))
        self.assertEqual(config, DEFAULTS)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_reads_values(self):
        self.write("debug_mode: true\nworld_file: worlds/forest.yaml\n")
        config = load_config(self.path)
        self.assertTrue(config["debug_mode"])
        self.assertEqual(config["world_file"], "worlds/forest.yaml")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_empty_file_is_defaults(self):
        self.write("")
        self.assertEqual(load_config(self.path), DEFAULTS)

    @mock.patch.dict(os.environ, {"MUD_DEBUG": "Yes"}, clear=True)
    def test_env_forces_debug(self):
        self.write("debug_mode: false\n")
        self.assertTrue(load_config(self.path)["debug_mode"])

    @mock.patch.dict(os.environ, {"MUD_DEBUG": "0"}, clear=True)
    def test_env_false_keeps_file_value(self):
        self.write("debug_mode: false\n")
        self.assertFalse(load_config(self.path)["debug_mode"])

    def test_non_mapping_rejected(self):
        self.write("- debug_mode\n")
        with self.assertRaises(yaml.YAMLError):
            load_config(self.path)


if __name__ == '__main__':
    unittest.main()
