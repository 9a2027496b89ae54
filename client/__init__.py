"""
Client package for the LAN file drop service.

This package contains the sender side:
- File transfer over the TRANSFER command
- Logging utilities
"""
