#!/usr/bin/env python3
"""
LAN File Drop Server - connection handling.

Accepts TCP connections and runs one handler task per connection. Each
handler reads one command frame at a time, runs it to completion and writes
a single response line before reading the next frame.
"""

import asyncio
from typing import Callable, Optional

from common.constants import COMMAND_BUFFER_SIZE
from common.protocol_definitions import ProtocolError, create_error_response
from server.control.command_parser import parse_command
from server.files.file_server import FileServer
from server.utils.config import TransferConfig, load_or_create
from server.utils.logger import logger


class TransferServer:
    """TCP acceptor plus the per-connection command loop."""

    def __init__(self, host: str, port: int,
                 config_loader: Callable[[], TransferConfig] = load_or_create):
        self.host = host
        self.port = port
        # Called once per TRANSFER so edits to the config file apply immediately
        self.config_loader = config_loader
        self.file_server = FileServer()
        self.server: Optional[asyncio.AbstractServer] = None

    async def handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        """Handle individual client connection."""
        addr = writer.get_extra_info('peername')
        logger.log_connection(addr)

        try:
            while True:
                data = await reader.read(COMMAND_BUFFER_SIZE)
                if not data:
                    logger.log_disconnect(addr)
                    break

                command = data.decode('utf-8', errors='replace').strip()
                logger.log_command(addr, command)

                response = await self.handle_command(command, reader, writer)

                if response:
                    writer.write(response.encode('utf-8') + b'\n')
                    await writer.drain()

        except asyncio.IncompleteReadError as e:
            logger.error(f"Connection from {addr} closed mid-transfer "
                         f"({len(e.partial)}/{e.expected} bytes received)")
        except OSError as e:
            logger.error(f"Error handling TCP connection from {addr}: {e}")
        except asyncio.CancelledError:
            logger.info(f"Connection cancelled for {addr}")
            raise
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                logger.debug(f"Error closing connection from {addr}: {e}")

    async def handle_command(self, command: str, reader: asyncio.StreamReader,
                             writer: asyncio.StreamWriter) -> str:
        """Parse and execute one command, returning the response line.

        Protocol, filesystem and path errors become ``ERROR: ...`` lines. Socket
        errors propagate and end the connection.
        """
        try:
            transfer = parse_command(command)
            config = self.config_loader()
            return await self.file_server.handle_transfer(transfer, reader, writer, config)
        except ProtocolError as e:
            logger.error(f"Command error: {e}")
            return create_error_response(str(e))
        except ConnectionError:
            raise
        except (OSError, ValueError) as e:
            logger.log_error("transfer", e)
            return create_error_response(str(e))

    async def listen(self) -> asyncio.AbstractServer:
        """Bind the listening socket and start accepting connections."""
        self.server = await asyncio.start_server(self.handle_client, self.host, self.port)
        addr = ', '.join(str(sock.getsockname()) for sock in self.server.sockets)
        logger.info(f"Custom TCP transfer server listening on {addr}")
        return self.server

    async def start(self):
        """Start the server and serve until cancelled."""
        server = await self.listen()
        async with server:
            await server.serve_forever()

    async def stop(self):
        if self.server:
            self.server.close()
            await self.server.wait_closed()
            self.server = None

    @property
    def bound_port(self) -> int:
        """Port actually bound (useful when constructed with port 0)."""
        return self.server.sockets[0].getsockname()[1]
