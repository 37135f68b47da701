"""
Test suite for fracindex

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/scenarios/     : Scenario tests (tight gaps, repeated subdivision, etc.)
"""
