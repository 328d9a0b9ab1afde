"""
Core domain models, errors and numerical primitives.

This module contains the building blocks of the XIRR computation; it performs
no I/O and keeps no state between calls.
"""
