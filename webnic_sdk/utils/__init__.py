"""
Shared utilities: configuration, logging and validation
"""
