"""
File transfer module for server-side file operations.

Handles:
- Transfer session handling
- File and folder size caps
- Collision-free file naming
"""
