# hash_sensitive/core/__init__.py

"""Core domain models and utilities used across the hashing system.

This package provides specification types, exceptions, and the YAML
specification loader shared by the rest of the application.
"""
