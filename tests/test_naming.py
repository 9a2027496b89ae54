#!/usr/bin/env python3
"""
Unit tests for collision-free file naming.
"""

import tempfile
import unittest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from server.files.naming import generate_unique_filename


class TestGenerateUniqueFilename(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.folder = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def touch(self, name):
        (self.folder / name).write_bytes(b'')

    def test_free_name_is_kept(self):
        self.assertEqual(generate_unique_filename(self.folder, 'a.txt'), 'a.txt')

    def test_first_collision_gets_1(self):
        self.touch('a.txt')
        self.assertEqual(generate_unique_filename(self.folder, 'a.txt'), 'a1.txt')

    def test_skips_taken_suffixes(self):
        for name in ('a.txt', 'a1.txt', 'a2.txt'):
            self.touch(name)
        self.assertEqual(generate_unique_filename(self.folder, 'a.txt'), 'a3.txt')

    def test_name_without_extension(self):
        self.touch('Makefile')
        self.assertEqual(generate_unique_filename(self.folder, 'Makefile'), 'Makefile1')

    def test_only_last_extension_is_split(self):
        self.touch('backup.tar.gz')
        self.assertEqual(generate_unique_filename(self.folder, 'backup.tar.gz'), 'backup.tar1.gz')

    def test_dotfile_has_no_extension(self):
        self.touch('.env')
        self.assertEqual(generate_unique_filename(self.folder, '.env'), '.env1')

    def test_sequence_of_writes_stays_distinct(self):
        names = []
        for _ in range(50):
            name = generate_unique_filename(self.folder, 'photo.jpg')
            self.touch(name)
            names.append(name)
        self.assertEqual(len(set(names)), 50)
        self.assertEqual(names[0], 'photo.jpg')
        self.assertEqual(names[1:], [f'photo{n}.jpg' for n in range(1, 50)])

    def test_timestamp_fallback_after_bound(self):
        with patch('server.files.naming.MAX_SUFFIX_ATTEMPTS', 3):
            for name in ('a.txt', 'a1.txt', 'a2.txt', 'a3.txt'):
                self.touch(name)
            result = generate_unique_filename(self.folder, 'a.txt', clock=lambda: 1700000000.7)
        self.assertEqual(result, 'a1700000000.txt')

    def test_timestamp_fallback_without_extension(self):
        with patch('server.files.naming.MAX_SUFFIX_ATTEMPTS', 1):
            self.touch('data')
            self.touch('data1')
            result = generate_unique_filename(self.folder, 'data', clock=lambda: 42)
        self.assertEqual(result, 'data42')


if __name__ == '__main__':
    unittest.main()
