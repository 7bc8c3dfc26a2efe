"""
Tests for cached YAML documents.
"""

import os
import shutil
import tempfile
import unittest

from UserConfig.config.document import YAMLFile


class TestYAMLFile(unittest.TestCase):
    """Test cases for YAMLFile."""

    def setUp(self):
        """Create a temporary directory holding a sample document."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_yaml = os.path.join(self.temp_dir, 'test_load.yaml')
        with open(self.test_yaml, 'w') as f:
            f.write("first: 123\nsecond: 456\n")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_path(self):
        self.assertEqual(YAMLFile(self.test_yaml, {}).path, self.test_yaml)

    def test_load_values(self):
        yaml_file = YAMLFile(self.test_yaml, {})
        self.assertEqual(yaml_file['first'], 123)
        self.assertEqual(yaml_file['second'], 456)
        self.assertIsNone(yaml_file['third'])

    def test_missing_file_is_empty(self):
        yaml_file = YAMLFile(os.path.join(self.temp_dir, 'absent.yaml'), {})
        self.assertEqual(yaml_file.to_dict(), {})
        self.assertTrue(yaml_file.is_empty())
        self.assertIsNone(yaml_file.get('anything'))

    def test_default_value(self):
        yaml_file = YAMLFile(self.test_yaml, {'third': 789})
        self.assertEqual(yaml_file['third'], 789)
        self.assertFalse(yaml_file.is_set('third'))

    def test_defaults_are_copied(self):
        default = {'third': 789}
        yaml_file = YAMLFile(self.test_yaml, default)
        default['third'] = 0
        self.assertEqual(yaml_file['third'], 789)

    def test_none_falls_back_to_default(self):
        yaml_file = YAMLFile(self.test_yaml, {'first': 1, 'flag': True})
        yaml_file['first'] = None
        yaml_file['flag'] = False
        self.assertEqual(yaml_file['first'], 1)
        self.assertIs(yaml_file['flag'], False)

    def test_to_yaml_excludes_defaults(self):
        yaml_file = YAMLFile(self.test_yaml, {'third': 789})
        lines = yaml_file.to_yaml().split("\n")
        lines = [line for line in lines if line]
        self.assertEqual(len(lines), 3)
        self.assertRegex(lines[0], r'^---')
        self.assertRegex(lines[1], r'^first')
        self.assertRegex(lines[2], r'^second')

    def test_merge_fills_missing_keys(self):
        yaml_file = YAMLFile(self.test_yaml, {'third': 789, 'first': 1}, merge=True)
        self.assertRegex(yaml_file.to_yaml(), r'(?m)^third')
        self.assertEqual(yaml_file.to_dict(), {'first': 123, 'second': 456, 'third': 789})

    def test_set_value(self):
        yaml_file = YAMLFile(self.test_yaml, {})
        yaml_file['third'] = 12345
        self.assertEqual(yaml_file['third'], 12345)
        self.assertRegex(yaml_file.to_yaml(), r'(?m)^third')

    def test_set_does_not_save(self):
        yaml_file = YAMLFile(self.test_yaml, {})
        yaml_file['third'] = 12345
        self.assertIsNone(YAMLFile(self.test_yaml, {})['third'])

    def test_delete_revives_default(self):
        yaml_file = YAMLFile(self.test_yaml, {'key': 'default'})
        yaml_file['key'] = 'value'
        self.assertTrue(yaml_file.is_set('key'))
        self.assertEqual(yaml_file.delete('key'), 'value')
        self.assertFalse(yaml_file.is_set('key'))
        self.assertEqual(yaml_file['key'], 'default')

    def test_delete_item(self):
        yaml_file = YAMLFile(self.test_yaml, {})
        del yaml_file['first']
        del yaml_file['missing']
        self.assertFalse(yaml_file.is_set('first'))
        self.assertIsNone(yaml_file['first'])

    def test_is_set_ignores_value(self):
        yaml_file = YAMLFile(self.test_yaml, {})
        yaml_file['empty'] = None
        self.assertTrue(yaml_file.is_set('empty'))

    def test_to_dict_prefer_defaults(self):
        yaml_file = YAMLFile(self.test_yaml, {'first': 1, 'third': 3})
        self.assertEqual(yaml_file.to_dict(), {'first': 123, 'second': 456})
        self.assertEqual(
            yaml_file.to_dict(prefer_defaults=True),
            {'first': 123, 'second': 456, 'third': 3},
        )

    def test_merged_view(self):
        yaml_file = YAMLFile(os.path.join(self.temp_dir, 'new.yaml'), {'a': 'A', 'b': 'B'})
        yaml_file['c'] = 'C'
        self.assertEqual(len(yaml_file), 3)
        self.assertIn('a', yaml_file)
        self.assertIn('c', yaml_file)
        self.assertNotIn('d', yaml_file)
        self.assertEqual(sorted(yaml_file), ['a', 'b', 'c'])
        self.assertEqual(sorted(yaml_file.keys()), ['a', 'b', 'c'])
        self.assertFalse(yaml_file.view.is_empty())

    def test_save(self):
        path = os.path.join(self.temp_dir, 'tmp', 'file1.yaml')
        yaml_file = YAMLFile(path, {'abc': 'ABC', 'def': 'DEF'})
        yaml_file.save()
        self.assertTrue(os.path.exists(path))

    def test_overwrite(self):
        path = os.path.join(self.temp_dir, 'tmp', 'file1.yaml')
        yaml_file = YAMLFile(path, {'abc': 'ABC'})
        yaml_file['hello'] = 'world'
        yaml_file.save()
        yaml_file = YAMLFile(path, {})
        self.assertEqual(yaml_file['hello'], 'world')
        self.assertIsNone(yaml_file['abc'])

        yaml_file.delete('hello')
        yaml_file.save()
        self.assertEqual(YAMLFile(path, {}).to_dict(), {})


if __name__ == "__main__":
    unittest.main()
