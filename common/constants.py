"""
Shared constants for the LAN file drop service.

This module contains all constants used across client and server components.
"""

# Network Configuration
DEFAULT_HOST = 'localhost'
DEFAULT_BIND = '127.0.0.1'
DEFAULT_PORT = 1000

# Public address discovery targets (UDP connect only, nothing is sent)
IP_DISCOVERY_PRIMARY = ('1.1.1.1', 53)
IP_DISCOVERY_FALLBACK = ('8.8.8.8', 53)

# Buffer Sizes
COMMAND_BUFFER_SIZE = 8192  # one read per command frame
SIZE_HEADER_LEN = 8  # big-endian u64 declared length

# Client timeouts
CONNECT_TIMEOUT = 10.0
RESPONSE_TIMEOUT = 30.0
COMMAND_SETTLE_DELAY = 0.05  # lets the command line arrive as its own frame

# File naming
MAX_SUFFIX_ATTEMPTS = 9999

# Configuration
CONFIG_FILE_NAME = 'transfer.json'
CONFIG_DIR_NAME = '.transfer'
CONFIG_DIR_ENV = 'TRANSFER_CONFIG_DIR'
WINDOWS_DEFAULT_FOLDER = 'C:/transfer'
DEFAULT_FOLDER_NAME = 'transfer'
TRANSFER_ID_GROUPS = 4
TRANSFER_ID_GROUP_LEN = 7

# Logging
LOG_DIR = 'logs'
TRANSFER_LOG_FILE = 'file_transfers.log'


# Command verbs
class Commands:
    TRANSFER = 'TRANSFER'


# Response line prefixes
class Responses:
    ACK = 'ACK'
    TRANSFER_COMPLETE = 'TRANSFER_COMPLETE'
    FILE_SIZE_LIMIT_EXCEEDED = 'FILE_SIZE_LIMIT_EXCEEDED'
    FOLDER_SIZE_LIMIT_EXCEEDED = 'FOLDER_SIZE_LIMIT_EXCEEDED'
    ERROR = 'ERROR'
