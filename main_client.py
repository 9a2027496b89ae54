#!/usr/bin/env python3
"""
LAN File Drop Client - Main Entry Point

Pushes one or more files to a file drop server over a single connection.

Usage:
    python main_client.py --host HOST --port PORT --transfer-id ID [--folder NAME] FILE [FILE ...]
"""

import argparse
import asyncio
import sys


async def send_files(host: str, port: int, transfer_id: str, files, folder=None) -> bool:
    from client.files.file_client import FileClient

    all_ok = True
    async with FileClient(host, port) as client:
        for file_path in files:
            result = await client.send_file(file_path, transfer_id, folder)
            all_ok = all_ok and result.success
    return all_ok


def main(argv=None) -> int:
    """Main entry point."""
    from client.utils.logger import logger

    parser = argparse.ArgumentParser(description='LAN File Drop Client')
    parser.add_argument('--host', type=str, default='localhost',
                        help='Server IP address (default: localhost)')
    parser.add_argument('--port', type=int, default=1000,
                        help='Server port (default: 1000)')
    parser.add_argument('--transfer-id', type=str, required=True,
                        help="Receiver's transfer id")
    parser.add_argument('--folder', type=str, default=None,
                        help='Subfolder on the receiver (no dots)')
    parser.add_argument('files', nargs='+', help='Files to send')

    args = parser.parse_args(argv)

    try:
        ok = asyncio.run(send_files(args.host, args.port, args.transfer_id, args.files, args.folder))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except (OSError, asyncio.TimeoutError) as e:
        logger.log_error("transfer", e)
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
