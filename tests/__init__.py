"""
Test suite for fpguard

Contains:
- tests/unit/          : Unit tests for individual modules
"""
