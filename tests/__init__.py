"""
Test suite for limitedvalue

Contains:
- tests/unit/          : Unit tests for core and reactive modules
"""
