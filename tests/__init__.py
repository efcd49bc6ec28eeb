"""
Test suite for binarydigit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
