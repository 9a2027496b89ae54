"""
Server logging module.

This module handles server-side logging functionality.
"""

import logging
from datetime import datetime
from pathlib import Path

from common.constants import LOG_DIR, TRANSFER_LOG_FILE


class ServerLogger:
    """Server logging class."""

    def __init__(self, logs_dir: str = LOG_DIR, log_level: int = logging.INFO):
        self.logs_dir = Path(logs_dir)

        # Set up main logger
        self.logger = logging.getLogger('transfer_server')
        self.logger.setLevel(log_level)

        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        # Create console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)

        # Add handler to logger
        self.logger.addHandler(console_handler)

        self.transfer_log_path = self.logs_dir / TRANSFER_LOG_FILE

    def set_level(self, log_level: int):
        """Change the level of the logger and its handlers."""
        self.logger.setLevel(log_level)
        for handler in self.logger.handlers:
            handler.setLevel(log_level)

    def set_logs_dir(self, logs_dir):
        """Redirect the transfer log file."""
        self.logs_dir = Path(logs_dir)
        self.transfer_log_path = self.logs_dir / TRANSFER_LOG_FILE

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def log_connection(self, addr: tuple):
        """Log accepted connection."""
        self.info(f"New TCP transfer connection from: {addr}")

    def log_disconnect(self, addr: tuple):
        """Log clean disconnect."""
        self.info(f"Client {addr} disconnected")

    def log_command(self, addr: tuple, command: str):
        """Log a received command frame."""
        self.info(f"Received command from {addr}: {command}")

    def log_transfer_id_mismatch(self, expected: str, received: str):
        """Log a transfer id that does not match the configured one."""
        self.warning(f"Transfer ID mismatch. Expected: {expected}, Received: {received}")

    def log_size_limit(self, filename: str, detail: str):
        """Log a rejected transfer."""
        self.error(f"Size limit exceeded for '{filename}': {detail}")

    def log_file_received(self, filename: str, size: int, directory):
        """Log a stored file."""
        self.info(f"✓ FILE RECEIVED: '{filename}' ({size} bytes)")
        self.info(f"  Directory: {directory}")
        self._write_to_file(self.transfer_log_path, f"{datetime.now().isoformat()} | RECEIVED | {filename} | SIZE: {size} bytes | DIR: {directory}")

    def log_error(self, operation: str, error: Exception):
        """Log error with operation context."""
        self.error(f"Error in {operation}: {error}")

    def _write_to_file(self, file_path: Path, content: str):
        """Write content to log file."""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'a', encoding='utf-8') as f:
                f.write(content + '\n')
        except OSError as e:
            self.error(f"Failed to write to log file {file_path}: {e}")


# Global logger instance
logger = ServerLogger()
