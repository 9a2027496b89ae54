"""
Directory structure helpers.

This module locates the configuration directory and creates the folders the
server writes into.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from common.constants import CONFIG_DIR_NAME, CONFIG_DIR_ENV, WINDOWS_DEFAULT_FOLDER, DEFAULT_FOLDER_NAME


def get_config_directory() -> Path:
    """Return the directory holding transfer.json.

    ``TRANSFER_CONFIG_DIR`` wins; otherwise ``%APPDATA%/.transfer`` on Windows
    and ``~/.local/share/.transfer`` elsewhere.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)

    if sys.platform == 'win32':
        appdata = os.environ.get('APPDATA')
        if not appdata:
            raise OSError("APPDATA environment variable is not set")
        return Path(appdata) / CONFIG_DIR_NAME

    return Path.home() / '.local' / 'share' / CONFIG_DIR_NAME


def get_default_folder() -> str:
    """Default base folder for received files."""
    if sys.platform == 'win32':
        return WINDOWS_DEFAULT_FOLDER
    return str(Path.home() / DEFAULT_FOLDER_NAME)


def create_directory_structure(config_dir=None) -> Path:
    """Create the config directory (and the default drop folder on Windows)."""
    config_dir = Path(config_dir) if config_dir else get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)

    if sys.platform == 'win32':
        Path(WINDOWS_DEFAULT_FOLDER).mkdir(parents=True, exist_ok=True)

    return config_dir


def ensure_directory_exists(base_path, subfolder: Optional[str] = None) -> Path:
    """Return ``base_path`` (joined with ``subfolder``), creating it if missing."""
    target_dir = Path(base_path)
    if subfolder:
        target_dir = target_dir / subfolder

    target_dir.mkdir(parents=True, exist_ok=True)
    return target_dir
