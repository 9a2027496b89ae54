"""
Command handling for the transfer server.

Handles:
- Command frame parsing
- TRANSFER argument splitting (transfer id, filename, optional folder)
"""
