"""
Test suite for complexfp

Contains:
- tests/unit/          : Unit tests for individual modules
"""
