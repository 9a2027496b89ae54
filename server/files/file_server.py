"""
File server module.

This module runs one TRANSFER session on an open connection: it reads the
declared length, applies the size caps before acknowledging, receives the
whole payload into memory and stores it under a collision-free name.
"""

import asyncio
from pathlib import Path

from common.constants import SIZE_HEADER_LEN
from common.protocol_definitions import (
    SizeLimitError, TransferCommand, decode_size_header,
    create_ack_response, create_size_limit_response, create_transfer_complete_response
)
from server.files.naming import generate_unique_filename
from server.files.size_limits import check_size_limits
from server.utils.logger import logger
from server.utils.structure import ensure_directory_exists


class FileServer:
    """Server-side file transfer functionality."""

    async def handle_transfer(self, command: TransferCommand, reader: asyncio.StreamReader,
                              writer: asyncio.StreamWriter, config) -> str:
        """Run a TRANSFER session and return the response line for the connection.

        ``config`` is the snapshot loaded for this command. Socket failures
        (including a short read) propagate to the caller.
        """
        logger.info(f"Handling TRANSFER - transfer_id: {command.transfer_id}, "
                    f"file: {command.filename}, folder: {command.folder}")

        if command.transfer_id != config.transfer_id:
            logger.log_transfer_id_mismatch(config.transfer_id, command.transfer_id)

        receive_dir = ensure_directory_exists(config.folder, command.folder)

        # Declared length is read before anything is acknowledged
        file_size = decode_size_header(await reader.readexactly(SIZE_HEADER_LEN))
        logger.info(f"Incoming file: {command.filename} ({file_size} bytes)")

        try:
            check_size_limits(config, file_size, receive_dir)
        except SizeLimitError as e:
            logger.log_size_limit(command.filename, e.detail)
            return create_size_limit_response(e)

        await self._send_line(writer, create_ack_response())

        saved_name = await self._receive_file_data(reader, receive_dir, command.filename, file_size)
        return create_transfer_complete_response(saved_name)

    async def _receive_file_data(self, reader: asyncio.StreamReader, receive_dir: Path,
                                 filename: str, file_size: int) -> str:
        """Read exactly ``file_size`` bytes, then write them under a unique name."""
        data = await reader.readexactly(file_size)

        unique_filename = generate_unique_filename(receive_dir, filename)
        file_path = receive_dir / unique_filename
        logger.debug(f"Saving file as: {unique_filename}")

        file_path.write_bytes(data)

        logger.log_file_received(unique_filename, len(data), receive_dir)
        return unique_filename

    async def _send_line(self, writer: asyncio.StreamWriter, line: str):
        writer.write(line.encode('utf-8') + b'\n')
        await writer.drain()
