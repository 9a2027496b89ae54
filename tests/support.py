"""
Test doubles for asyncio streams.
"""

import asyncio


class ScriptedReader:
    """StreamReader stand-in fed from a list of chunks.

    ``read()`` hands out one whole chunk per call, the way a command frame
    arrives. ``readexactly()`` draws bytes from the following chunks.
    """

    def __init__(self, *chunks: bytes):
        self.chunks = list(chunks)
        self.buffer = b''
        self.reads = 0

    async def read(self, n: int = -1) -> bytes:
        self.reads += 1
        if self.buffer:
            data, self.buffer = self.buffer[:n], self.buffer[n:]
            return data
        if not self.chunks:
            return b''
        return self.chunks.pop(0)

    async def readexactly(self, n: int) -> bytes:
        while len(self.buffer) < n and self.chunks:
            self.buffer += self.chunks.pop(0)
        if len(self.buffer) < n:
            partial, self.buffer = self.buffer, b''
            raise asyncio.IncompleteReadError(partial, n)
        data, self.buffer = self.buffer[:n], self.buffer[n:]
        return data


class RecordingWriter:
    """StreamWriter stand-in that keeps everything written to it."""

    def __init__(self, peername=('127.0.0.1', 50000)):
        self.data = bytearray()
        self.peername = peername
        self.closed = False

    def write(self, data: bytes):
        self.data += data

    async def drain(self):
        pass

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass

    def get_extra_info(self, name, default=None):
        if name == 'peername':
            return self.peername
        return default

    def lines(self):
        return self.data.decode('utf-8').splitlines()
