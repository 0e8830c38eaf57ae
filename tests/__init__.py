"""
Test suite for planar-angle

Contains:
- tests/unit/          : Unit tests for individual modules
"""
