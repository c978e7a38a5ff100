"""
Test suite for the numeric text field core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
