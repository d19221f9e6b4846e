"""Shortest round-trip decimal mantissa and exponent for IEEE 754 doubles."""

__version__ = "2.0.0a2"