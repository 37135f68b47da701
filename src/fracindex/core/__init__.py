"""
Core domain models and decimal primitives.

This module contains the foundational building blocks that are independent
of any storage or transport layer.
"""
