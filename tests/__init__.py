"""
Test suite for decimal128

Contains:
- tests/unit/          : Unit tests for codec stages, value model and contracts
"""
