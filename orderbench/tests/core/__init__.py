"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
Driven ports are replaced with in-memory fakes from tests/fakes/ or
with unittest.mock objects.
"""
