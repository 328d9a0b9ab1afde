"""
Test suite for xirr

Contains:
- tests/unit/          : Unit tests for individual modules
"""
