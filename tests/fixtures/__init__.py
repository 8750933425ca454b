"""
Shared test helpers: fake clock and in-memory repositories.
"""
