"""
Test suite for mathutil

Contains:
- tests/unit/          : Unit tests for individual modules
"""
