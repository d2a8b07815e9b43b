"""
Test suite for machin-pi

Contains:
- tests/unit/          : Unit tests for individual modules
"""
