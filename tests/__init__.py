"""
Test suite for crazy-generics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
