#!/usr/bin/env python3
"""
Unit tests for file and folder size caps.
"""

import tempfile
import unittest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from common.constants import Responses
from common.protocol_definitions import SizeLimitError
from server.files.size_limits import calculate_folder_size, check_size_limits
from server.utils.config import TransferConfig


def make_config(max_file_size=0, max_folder_size=0):
    return TransferConfig(bind='127.0.0.1', port=0, transfer_id='abc', folder='.',
                          max_file_size=max_file_size, max_folder_size=max_folder_size)


class TestCalculateFolderSize(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.folder = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_empty_folder(self):
        self.assertEqual(calculate_folder_size(self.folder), 0)

    def test_missing_folder(self):
        self.assertEqual(calculate_folder_size(self.folder / 'nope'), 0)

    def test_counts_direct_files_only(self):
        (self.folder / 'a.bin').write_bytes(b'x' * 10)
        (self.folder / 'b.bin').write_bytes(b'x' * 5)
        sub = self.folder / 'sub'
        sub.mkdir()
        (sub / 'deep.bin').write_bytes(b'x' * 1000)
        self.assertEqual(calculate_folder_size(self.folder), 15)

    @unittest.skipIf(sys.platform == 'win32', 'symlinks need privileges on Windows')
    def test_symlinks_are_not_followed(self):
        outside = tempfile.TemporaryDirectory()
        self.addCleanup(outside.cleanup)
        target = Path(outside.name) / 'huge.bin'
        target.write_bytes(b'x' * 5000)
        (self.folder / 'a.bin').write_bytes(b'x' * 10)
        (self.folder / 'link.bin').symlink_to(target)
        self.assertEqual(calculate_folder_size(self.folder), 10)


class TestCheckSizeLimits(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.folder = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_unlimited_accepts_anything(self):
        (self.folder / 'big.bin').write_bytes(b'x' * 100)
        check_size_limits(make_config(), 2 ** 40, self.folder)

    def test_file_cap_boundary(self):
        config = make_config(max_file_size=11)
        check_size_limits(config, 11, self.folder)
        with self.assertRaises(SizeLimitError) as ctx:
            check_size_limits(config, 12, self.folder)
        err = ctx.exception
        self.assertEqual(err.limit, SizeLimitError.FILE)
        self.assertEqual(err.response_prefix, Responses.FILE_SIZE_LIMIT_EXCEEDED)
        self.assertEqual(err.detail, "File size 12 bytes exceeds maximum allowed file size 11 bytes")

    def test_folder_cap_counts_existing_files(self):
        (self.folder / 'existing.bin').write_bytes(b'x' * 60)
        config = make_config(max_folder_size=100)
        check_size_limits(config, 40, self.folder)
        with self.assertRaises(SizeLimitError) as ctx:
            check_size_limits(config, 41, self.folder)
        err = ctx.exception
        self.assertEqual(err.limit, SizeLimitError.FOLDER)
        self.assertEqual(err.response_prefix, Responses.FOLDER_SIZE_LIMIT_EXCEEDED)
        self.assertIn("folder size 101 bytes", err.detail)
        self.assertIn("(current: 60 bytes)", err.detail)

    def test_folder_total_is_rescanned_each_call(self):
        config = make_config(max_folder_size=100)
        check_size_limits(config, 80, self.folder)
        (self.folder / 'new.bin').write_bytes(b'x' * 80)
        with self.assertRaises(SizeLimitError):
            check_size_limits(config, 80, self.folder)

    def test_file_cap_checked_before_folder_cap(self):
        config = make_config(max_file_size=10, max_folder_size=5)
        with self.assertRaises(SizeLimitError) as ctx:
            check_size_limits(config, 20, self.folder)
        self.assertEqual(ctx.exception.limit, SizeLimitError.FILE)


if __name__ == '__main__':
    unittest.main()
