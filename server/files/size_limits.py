"""
Size limit checks for incoming transfers.

A cap of 0 means unlimited. The folder total is rescanned on every call and
only counts regular files directly inside the destination directory; symlinks
are not followed.
"""

import os
from pathlib import Path

from common.protocol_definitions import SizeLimitError


def calculate_folder_size(folder_path) -> int:
    """Sum the sizes of the direct file entries of a directory."""
    folder = Path(folder_path)
    if not folder.exists():
        return 0

    total_size = 0
    with os.scandir(folder) as entries:
        for entry in entries:
            if entry.is_file(follow_symlinks=False):
                total_size += entry.stat(follow_symlinks=False).st_size
    return total_size


def check_size_limits(config, file_size: int, folder_path) -> None:
    """Raise SizeLimitError if ``file_size`` breaks the file or folder cap in ``config``."""
    if config.max_file_size > 0 and file_size > config.max_file_size:
        raise SizeLimitError(
            SizeLimitError.FILE,
            f"File size {file_size} bytes exceeds maximum allowed file size "
            f"{config.max_file_size} bytes"
        )

    if config.max_folder_size > 0:
        current_folder_size = calculate_folder_size(folder_path)
        new_total_size = current_folder_size + file_size
        if new_total_size > config.max_folder_size:
            raise SizeLimitError(
                SizeLimitError.FOLDER,
                f"Adding file would result in folder size {new_total_size} bytes, "
                f"exceeding maximum allowed folder size {config.max_folder_size} bytes "
                f"(current: {current_folder_size} bytes)"
            )
