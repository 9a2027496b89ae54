"""
Collision-free file naming for received files.
"""

import time
from pathlib import Path

from common.constants import MAX_SUFFIX_ATTEMPTS


def _with_suffix(stem: str, suffix, extension) -> str:
    if extension:
        return f"{stem}{suffix}.{extension}"
    return f"{stem}{suffix}"


def generate_unique_filename(directory, filename: str, clock=time.time) -> str:
    """Return ``filename`` or the first free ``<stem><n>[.<ext>]`` in ``directory``.

    Numbers are probed from 1 to 9999. Past that the name falls back to
    ``<stem><epoch seconds>[.<ext>]``, which is not checked for collisions.
    """
    directory = Path(directory)
    if not (directory / filename).exists():
        return filename

    path = Path(filename)
    extension = path.suffix[1:] if path.suffix else None
    stem = path.stem if extension else filename

    for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        candidate = _with_suffix(stem, counter, extension)
        if not (directory / candidate).exists():
            return candidate

    return _with_suffix(stem, int(clock()), extension)
