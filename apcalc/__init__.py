"""Arbitrary precision integer arithmetic on decimal digit tuples, with a command line calculator."""

__version__ = "0.1.0"
__all__ = ["__version__"]