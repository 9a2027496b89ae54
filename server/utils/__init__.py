"""
Server utilities: configuration, directory structure, address discovery and logging.
"""
