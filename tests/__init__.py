"""
Test suite for heidi

Contains:
- tests/unit/          : Unit tests for individual modules
"""
