"""
Test suite for ntheory

Contains:
- tests/unit/          : Unit tests for individual modules
"""
