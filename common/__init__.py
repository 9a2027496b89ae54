"""
Shared protocol constants and definitions for client and server.
"""
