"""
Command parser module.

Turns one command frame into a ``TransferCommand``:

    TRANSFER <transfer_id> <filename> [<folder>]

The verb is matched case-insensitively. Filenames are not escaped and may
contain spaces, so the optional folder is recognised by a heuristic: the token
after the last space is a folder when it is non-empty and has no ``.`` in it.
A filename without an extension followed by a space is therefore read as
``<filename> <folder>``; senders that need such names must add an extension.
"""

from pathlib import PurePosixPath, PureWindowsPath

from common.constants import Commands
from common.protocol_definitions import ProtocolError, TransferCommand

USAGE = f"{Commands.TRANSFER} command usage: {Commands.TRANSFER} <transfer_id> <file> [<folder>]"


def parse_command(line: str) -> TransferCommand:
    """Parse a command line, raising ProtocolError when it is not a valid TRANSFER."""
    command = line.strip()
    if not command:
        raise ProtocolError("Empty command")

    verb = command.split(None, 1)[0]
    if verb.upper() != Commands.TRANSFER:
        raise ProtocolError(f"Unknown command: {verb}. Available commands: {Commands.TRANSFER}")

    remaining = command[len(verb):].strip()
    first_space = remaining.find(' ')
    if first_space == -1:
        raise ProtocolError(USAGE)

    transfer_id = remaining[:first_space]
    rest = remaining[first_space + 1:].strip()

    filename, folder = split_filename_and_folder(rest)
    _validate_filename(filename)
    if folder is not None:
        _validate_folder(folder)
    return TransferCommand(transfer_id=transfer_id, filename=filename, folder=folder)


def split_filename_and_folder(rest: str):
    """Apply the last-space heuristic to ``<filename> [<folder>]``."""
    last_space = rest.rfind(' ')
    if last_space == -1:
        return rest, None

    potential_folder = rest[last_space + 1:]
    potential_filename = rest[:last_space].rstrip()
    if potential_folder and '.' not in potential_folder and potential_filename:
        return potential_filename, potential_folder
    return rest, None


def _validate_filename(filename: str):
    if filename in ('.', '..') or any(c in filename for c in ('/', '\\', '\x00')):
        raise ProtocolError(f"Invalid filename: {filename}")


def _validate_folder(folder: str):
    # folder has no '.', so only absolute and drive-qualified paths can escape the base
    if '\x00' in folder or PurePosixPath(folder).is_absolute() or PureWindowsPath(folder).anchor:
        raise ProtocolError(f"Invalid folder: {folder}")
