"""
Client utilities.
"""
