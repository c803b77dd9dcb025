"""
Test suite for timespan

Contains:
- tests/unit/          : Unit tests for individual modules
"""
