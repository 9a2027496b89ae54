"""
Server package for the LAN file drop service.

This package contains all server-side functionality including:
- Connection acceptance and the per-connection command loop
- TRANSFER command parsing
- File receiving, size caps and collision-free naming
- Configuration and utilities
"""
