"""Unit tests for core domain logic.

These tests exercise one component at a time. Its collaborators are
replaced with in-memory fakes from tests/fakes/.
"""
