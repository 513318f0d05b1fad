"""
Infrastructure layer package.

Contains adapters implementing domain ports: SQL and in-memory
storage, password hashing.
"""
