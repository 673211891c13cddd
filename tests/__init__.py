"""
Test suite for the MRZ date core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
