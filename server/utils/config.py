"""
Server configuration module.

This module loads, repairs and saves ``transfer.json``. Every call to
``load_or_create`` returns a fresh ``TransferConfig`` snapshot; nothing is
cached, so edits to the file apply to the next transfer.
"""

import json
import secrets
import string
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Optional

from common.constants import (
    DEFAULT_BIND, DEFAULT_PORT, CONFIG_FILE_NAME, TRANSFER_ID_GROUPS, TRANSFER_ID_GROUP_LEN
)
from server.utils.logger import logger
from server.utils.network import detect_public_ip
from server.utils.structure import get_config_directory, get_default_folder

TRANSFER_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_transfer_id() -> str:
    """Generate an id in the form xxxxxxx-xxxxxxx-xxxxxxx-xxxxxxx."""
    return '-'.join(
        ''.join(secrets.choice(TRANSFER_ID_ALPHABET) for _ in range(TRANSFER_ID_GROUP_LEN))
        for _ in range(TRANSFER_ID_GROUPS)
    )


@dataclass(frozen=True)
class TransferConfig:
    """Immutable configuration snapshot for one transfer."""
    bind: str
    port: int
    transfer_id: str
    folder: str
    max_file_size: int = 0  # 0 = unlimited
    max_folder_size: int = 0  # 0 = unlimited

    @classmethod
    def default(cls) -> 'TransferConfig':
        return cls(
            bind=DEFAULT_BIND,
            port=DEFAULT_PORT,
            transfer_id=generate_transfer_id(),
            folder=get_default_folder(),
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'TransferConfig':
        """Build a snapshot, replacing missing or ill-typed fields with defaults."""
        defaults = cls.default()

        def pick(key, check):
            value = data.get(key)
            if value is not None and not isinstance(value, bool) and check(value):
                return value
            return getattr(defaults, key)

        return cls(
            bind=pick('bind', lambda v: isinstance(v, str) and v != ''),
            port=pick('port', lambda v: isinstance(v, int) and 0 <= v <= 65535),
            transfer_id=pick('transfer_id', lambda v: isinstance(v, str) and v != ''),
            folder=pick('folder', lambda v: isinstance(v, str) and v != ''),
            max_file_size=pick('max_file_size', lambda v: isinstance(v, int) and v >= 0),
            max_folder_size=pick('max_folder_size', lambda v: isinstance(v, int) and v >= 0),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def get_config_path(config_dir=None) -> Path:
    config_dir = Path(config_dir) if config_dir else get_config_directory()
    return config_dir / CONFIG_FILE_NAME


def load_or_create(config_dir=None, detect_bind: bool = True) -> TransferConfig:
    """Load transfer.json, falling back to defaults, and write it back.

    An unreadable or unparsable file is replaced with defaults. With
    ``detect_bind`` the bind address is refreshed from address discovery.
    """
    config_path = get_config_path(config_dir)

    data = None
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding='utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Invalid config file {config_path}, using defaults: {e}")

    if isinstance(data, dict):
        config = TransferConfig.from_dict(data)
    else:
        config = TransferConfig.default()

    if detect_bind:
        try:
            config = replace(config, bind=detect_public_ip())
        except OSError as e:
            logger.debug(f"Public address discovery failed, keeping bind {config.bind}: {e}")

    save_config(config, config_path)
    return config


def save_config(config: TransferConfig, config_path) -> None:
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_dict(), indent=2) + '\n', encoding='utf-8')


def make_config_loader(config_dir: Optional[str] = None, detect_bind: bool = True):
    """Return a zero-argument loader bound to ``config_dir``."""
    def loader() -> TransferConfig:
        return load_or_create(config_dir, detect_bind=detect_bind)
    return loader
