"""
Test suite for farey_approx

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
