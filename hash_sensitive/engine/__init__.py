# hash_sensitive/engine/__init__.py

"""Engine package providing the digest engine and the tree redactor.

This package contains node classification, the hashlib-backed Hasher and
the TreeRedactor that walks nested data and hashes sensitive values.
"""
