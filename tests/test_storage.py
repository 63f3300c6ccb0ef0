import json
import os
import shutil
import stat
import tempfile
import unittest

from core.storage import load_existing_translations, load_translations, save_translations
from core.validator import InvalidTranslationsError


class TestStorage(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write(self, name, content):
        path = os.path.join(self.test_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load_translations(self):
        path = self._write("en.json", '{"a": "X", "b": "Y"}')
        self.assertEqual(load_translations(path), {"a": "X", "b": "Y"})

    def test_load_missing_source_raises(self):
        with self.assertRaises(OSError):
            load_translations(os.path.join(self.test_dir, "nope.json"))

    def test_load_invalid_json_raises(self):
        with self.assertRaises(json.JSONDecodeError):
            load_translations(self._write("en.json", "{broken"))

    def test_load_nested_raises(self):
        with self.assertRaises(InvalidTranslationsError):
            load_translations(self._write("en.json", '{"a": {"b": "c"}}'))

    def test_existing_missing_file_is_empty(self):
        self.assertEqual(load_existing_translations(os.path.join(self.test_dir, "nl.json")), {})

    def test_existing_corrupt_file_is_empty(self):
        path = self._write("nl.json", "not json at all")
        with self.assertLogs("core.storage", level="WARNING") as logs:
            self.assertEqual(load_existing_translations(path), {})
        self.assertIn("Could not read", logs.output[0])

    def test_existing_array_is_empty(self):
        self.assertEqual(load_existing_translations(self._write("nl.json", '["a"]')), {})

    def test_save_pretty_prints_utf8(self):
        path = os.path.join(self.test_dir, "out", "de.json")
        save_translations(path, {"greeting": "Grüß dich", "a": "b"})
        with open(path, encoding="utf-8") as f:
            content = f.read()
        self.assertEqual(content, '{\n  "greeting": "Grüß dich",\n  "a": "b"\n}')
        self.assertEqual(os.listdir(os.path.dirname(path)), ["de.json"])


    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_save_keeps_mode_of_existing_file(self):
        path = self._write("nl.json", '{"a": "b"}')
        os.chmod(path, 0o644)
        save_translations(path, {"a": "b", "c": "d"})
        self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o644)

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_save_new_file_follows_umask(self):
        path = os.path.join(self.test_dir, "fr.json")
        old_mask = os.umask(0o022)
        try:
            save_translations(path, {"a": "b"})
        finally:
            os.umask(old_mask)
        self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o644)


if __name__ == "__main__":
    unittest.main()
