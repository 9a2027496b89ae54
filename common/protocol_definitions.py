"""
Protocol definitions for the LAN file drop service.

This module defines the command structure, error types and the text/binary
formats exchanged between the sender and the receiving server:

    C -> S: "TRANSFER <transfer_id> <filename> [<folder>]"
    C -> S: 8-byte big-endian declared length
    S -> C: "ACK" | "FILE_SIZE_LIMIT_EXCEEDED: ..." | "FOLDER_SIZE_LIMIT_EXCEEDED: ..."
    C -> S: payload (declared length bytes, only after ACK)
    S -> C: "TRANSFER_COMPLETE: <final filename>" | "ERROR: <message>"
"""

import struct
from dataclasses import dataclass
from typing import Optional, Tuple

from common.constants import Commands, Responses, SIZE_HEADER_LEN

SIZE_HEADER = struct.Struct('!Q')
MAX_DECLARED_LENGTH = 2 ** 64 - 1


class ProtocolError(Exception):
    """Raised for an empty, unknown or malformed command line."""


class SizeLimitError(Exception):
    """Raised when a declared length would break a file or folder size cap."""

    FILE = 'file'
    FOLDER = 'folder'

    def __init__(self, limit: str, detail: str):
        super().__init__(detail)
        self.limit = limit
        self.detail = detail

    @property
    def response_prefix(self) -> str:
        if self.limit == self.FILE:
            return Responses.FILE_SIZE_LIMIT_EXCEEDED
        return Responses.FOLDER_SIZE_LIMIT_EXCEEDED


@dataclass(frozen=True)
class TransferCommand:
    """Parsed TRANSFER request."""
    transfer_id: str
    filename: str
    folder: Optional[str] = None
    verb: str = Commands.TRANSFER


def create_transfer_command(transfer_id: str, filename: str, folder: Optional[str] = None) -> str:
    """Create a TRANSFER command line."""
    if folder and folder.strip():
        return f"{Commands.TRANSFER} {transfer_id} {filename} {folder.strip()}\n"
    return f"{Commands.TRANSFER} {transfer_id} {filename}\n"


def encode_size_header(size: int) -> bytes:
    """Pack a declared length as 8 big-endian bytes."""
    if size < 0 or size > MAX_DECLARED_LENGTH:
        raise ValueError(f"declared length out of range: {size}")
    return SIZE_HEADER.pack(size)


def decode_size_header(data: bytes) -> int:
    """Unpack the 8-byte big-endian declared length."""
    if len(data) != SIZE_HEADER_LEN:
        raise ValueError(f"size header must be {SIZE_HEADER_LEN} bytes, got {len(data)}")
    (size,) = SIZE_HEADER.unpack(data)
    return size


def create_ack_response() -> str:
    return Responses.ACK


def create_transfer_complete_response(filename: str) -> str:
    return f"{Responses.TRANSFER_COMPLETE}: {filename}"


def create_size_limit_response(error: SizeLimitError) -> str:
    return f"{error.response_prefix}: {error.detail}"


def create_error_response(message: str) -> str:
    return f"{Responses.ERROR}: {message}"


def parse_response(line: str) -> Tuple[str, str]:
    """Split a server reply line into (kind, detail).

    ``ACK`` has an empty detail. Lines without a known prefix come back as
    ``('', line)``.
    """
    line = line.strip()
    if line == Responses.ACK:
        return Responses.ACK, ''
    kind, sep, detail = line.partition(':')
    known = (
        Responses.TRANSFER_COMPLETE,
        Responses.FILE_SIZE_LIMIT_EXCEEDED,
        Responses.FOLDER_SIZE_LIMIT_EXCEEDED,
        Responses.ERROR,
    )
    if sep and kind in known:
        return kind, detail.strip()
    return '', line
