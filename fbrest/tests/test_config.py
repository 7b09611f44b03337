import os
import tempfile
import unittest

from fbrest.cli.config import ConfigManager, StoreResolver
from fbrest.utils.exceptions import ConfigError


class TestConfigManager(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_write_then_read(self):
        path = os.path.join(self.root, ".fbrest")
        ConfigManager.write(path, "https://db.firebaseio.com/", "tok")
        self.assertEqual(
            ConfigManager.read(path),
            {'url': "https://db.firebaseio.com/", 'token': "tok"},
        )

    def test_read_ignores_comments_and_other_sections(self):
        path = os.path.join(self.root, ".fbrest")
        with open(path, "w", encoding="utf-8") as f:
            f.write("# comment\n[OTHER]\nURL=nope\n\n[DEFAULT]\nurl = https://a.io\n")
        self.assertEqual(ConfigManager.read(path), {'url': "https://a.io", 'token': None})

    def test_missing_file_reads_empty(self):
        self.assertEqual(ConfigManager.read(os.path.join(self.root, "absent")), {'url': None, 'token': None})

    def test_find_searches_parent_directories(self):
        ConfigManager.write(os.path.join(self.root, ".fbrest"), "https://a.io")
        nested = os.path.join(self.root, "x", "y")
        os.makedirs(nested)
        self.assertEqual(ConfigManager.find_config_file(nested), os.path.join(self.root, ".fbrest"))


class TestStoreResolver(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, ".fbrest")
        ConfigManager.write(self.path, "https://file.io/", "file-token")

    def tearDown(self):
        self._tmp.cleanup()

    def test_global_option_wins(self):
        config = StoreResolver.resolve(
            {'url': "https://opt.io", 'token': "opt-token", 'insecure': True},
            environ={'FBREST_URL': "https://env.io"},
            config_path=self.path,
        )
        self.assertEqual((config.url, config.token, config.insecure, config.source),
                         ("https://opt.io", "opt-token", True, 'global'))

    def test_environment_before_file(self):
        config = StoreResolver.resolve({}, environ={'FBREST_URL': "https://env.io"}, config_path=self.path)
        self.assertEqual((config.url, config.token, config.source), ("https://env.io", "file-token", 'env'))

    def test_file_fallback(self):
        config = StoreResolver.resolve({}, environ={}, config_path=self.path)
        self.assertEqual((config.url, config.source), ("https://file.io/", 'file'))

    def test_no_url_anywhere_raises(self):
        with self.assertRaises(ConfigError):
            StoreResolver.resolve({}, environ={}, config_path=os.path.join(self._tmp.name, "absent"))


if __name__ == "__main__":
    unittest.main()
