"""
Tests package for the elogbook backend.

- unit/: Fast tests, no external services
- integration/: Tests against a real Redis server
- property/: Hypothesis property-based tests
"""
