"""
File client module.

This module pushes files to a file drop server with the TRANSFER command.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from common.constants import (
    DEFAULT_HOST, DEFAULT_PORT, CONNECT_TIMEOUT, RESPONSE_TIMEOUT, COMMAND_SETTLE_DELAY, Responses
)
from common.protocol_definitions import create_transfer_command, encode_size_header, parse_response
from client.utils.logger import logger


@dataclass
class TransferResult:
    """Outcome of one transfer."""
    success: bool
    filename: Optional[str]  # name the server stored the file under
    message: str  # last line received from the server


class FileClient:
    """Client-side file transfer functionality."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        self.host = host
        self.port = port
        self.reader: Optional[asyncio.StreamReader] = None
        self.writer: Optional[asyncio.StreamWriter] = None

    async def open(self):
        """Connect to the server; transfers reuse this connection until close()."""
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                timeout=CONNECT_TIMEOUT
            )
        except (OSError, asyncio.TimeoutError):
            logger.log_connection(self.host, self.port, False)
            raise
        logger.log_connection(self.host, self.port, True)

    async def close(self):
        if self.writer:
            self.writer.close()
            await self.writer.wait_closed()
        self.reader = None
        self.writer = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def send_file(self, file_path: str, transfer_id: str, folder: Optional[str] = None,
                        filename: Optional[str] = None) -> TransferResult:
        """Send a file from disk, stored remotely as ``filename`` or the file's own name."""
        path = Path(file_path)
        data = path.read_bytes()
        return await self.send_bytes(data, filename or path.name, transfer_id, folder)

    async def send_bytes(self, data: bytes, filename: str, transfer_id: str,
                         folder: Optional[str] = None) -> TransferResult:
        """Run one TRANSFER exchange for an in-memory payload.

        Opens (and afterwards closes) a connection if none is open.
        """
        opened_here = self.writer is None
        if opened_here:
            await self.open()

        logger.log_file_upload(filename, len(data), folder)

        try:
            self.writer.write(create_transfer_command(transfer_id, filename, folder).encode('utf-8'))
            await self.writer.drain()
            # The server reads the command line as its own frame before the header
            await asyncio.sleep(COMMAND_SETTLE_DELAY)

            self.writer.write(encode_size_header(len(data)))
            await self.writer.drain()

            reply = await self._read_response()
            kind, _ = parse_response(reply)
            if kind != Responses.ACK:
                logger.log_transfer_result(filename, False, reply)
                return TransferResult(False, None, reply)

            self.writer.write(data)
            await self.writer.drain()

            reply = await self._read_response()
            kind, detail = parse_response(reply)
            if kind == Responses.TRANSFER_COMPLETE:
                logger.log_transfer_result(filename, True, detail)
                return TransferResult(True, detail, reply)

            logger.log_transfer_result(filename, False, reply)
            return TransferResult(False, None, reply)
        finally:
            if opened_here:
                await self.close()

    async def _read_response(self) -> str:
        line = await asyncio.wait_for(self.reader.readline(), timeout=RESPONSE_TIMEOUT)
        if not line:
            raise ConnectionError("Server closed the connection")
        return line.decode('utf-8', errors='replace').strip()
