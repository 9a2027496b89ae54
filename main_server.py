#!/usr/bin/env python3
"""
LAN File Drop Server - Main Entry Point

Receives files pushed over raw TCP with the TRANSFER command and stores them
in the configured folder. Settings live in transfer.json in the config
directory and are re-read for every transfer.

Usage:
    python main_server.py

Optional arguments:
    --config-dir DIR      Directory holding transfer.json
    --host HOST           Bind address (default: from transfer.json)
    --port PORT           TCP port (default: from transfer.json)
    --debug               Verbose logging
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path


def main(argv=None) -> int:
    from server.main_server import TransferServer
    from server.utils.config import load_or_create, make_config_loader
    from server.utils.logger import logger
    from server.utils.structure import create_directory_structure

    parser = argparse.ArgumentParser(description='LAN File Drop Server')
    parser.add_argument('--config-dir', type=str, default=None,
                        help='Directory holding transfer.json (default: per-user config directory)')
    parser.add_argument('--host', type=str, default=None,
                        help='Host to bind to (default: bind from transfer.json)')
    parser.add_argument('--port', type=int, default=None,
                        help='TCP port (default: port from transfer.json)')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.debug:
        logger.set_level(logging.DEBUG)

    try:
        config = load_or_create(args.config_dir)
        create_directory_structure(args.config_dir or None)
        Path(config.folder).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to prepare configuration: {e}")
        return 1

    host = args.host or config.bind
    port = args.port if args.port is not None else config.port

    logger.info(f"Transfer running on {host}:{port}")
    logger.info(f"Transfer ID: {config.transfer_id}")
    logger.info(f"Transfer folder: {config.folder}")

    server = TransferServer(host, port, config_loader=make_config_loader(args.config_dir))
    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info("Server shutting down...")
    except OSError as e:
        logger.error(f"Server failed to start: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
