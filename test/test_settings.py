import os
import tempfile
import unittest
from unittest.mock import patch

from vecpath.kernel.settings import Settings


class TestSettings(unittest.TestCase):
    """Console defaults stored in vecpath.cfg."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, "vecpath.cfg")

    def tearDown(self):
        if os.path.exists(self.config_file):
            os.remove(self.config_file)
        os.rmdir(self.temp_dir)

    def test_precision_round_trip(self):
        settings = Settings(None, self.config_file)
        self.assertEqual(settings.read_persistent(int, "console", "precision", 6), 6)
        settings.write_persistent("console", "precision", 3)
        settings.write_configuration()

        reloaded = Settings(None, self.config_file)
        self.assertEqual(reloaded.read_persistent(int, "console", "precision", 6), 3)

    def test_unparsable_value(self):
        settings = Settings(None, self.config_file, ignore_settings=True)
        settings.write_persistent("console", "precision", "many")
        self.assertEqual(settings.read_persistent(int, "console", "precision", 6), 6)

    def test_bool_and_percent(self):
        settings = Settings(None, self.config_file, ignore_settings=True)
        settings.write_persistent("console", "verbose", True)
        settings.write_persistent("console", "label", "50%")
        settings.write_configuration()

        reloaded = Settings(None, self.config_file)
        self.assertTrue(reloaded.read_persistent(bool, "console", "verbose"))
        self.assertEqual(reloaded.read_persistent(str, "console", "label"), "50%")

    def test_ignore_settings(self):
        settings = Settings(None, self.config_file)
        settings.write_persistent("console", "precision", 2)
        settings.write_configuration()

        ignored = Settings(None, self.config_file, ignore_settings=True)
        self.assertIsNone(ignored.read_persistent(int, "console", "precision"))

    def test_ignore_settings_creates_nothing(self):
        with patch(
            "vecpath.kernel.settings.get_safe_path", return_value=self.temp_dir
        ) as safe_path:
            settings = Settings("vecpath", "vecpath.cfg", ignore_settings=True)
        safe_path.assert_called_once_with("vecpath", create=False)
        self.assertEqual(str(settings.config_file), self.config_file)
        self.assertFalse(os.path.exists(self.config_file))

    def test_directory_created_when_used(self):
        with patch(
            "vecpath.kernel.settings.get_safe_path", return_value=self.temp_dir
        ) as safe_path:
            Settings("vecpath", "vecpath.cfg")
        safe_path.assert_called_once_with("vecpath", create=True)

    def test_broken_file(self):
        with open(self.config_file, "w", encoding="utf-8") as fp:
            fp.write("precision = 3\n")
        settings = Settings(None, self.config_file)
        self.assertEqual(settings.read_persistent(int, "console", "precision", 6), 6)


if __name__ == "__main__":
    unittest.main()
