"""
File transfer module for client-side file operations.

Handles:
- Sending files and in-memory payloads
- Interpreting server replies
"""
