"""Hensel-Optimized Key Generation: Hensel lifting, curve arithmetic and key pairs."""

__version__ = "0.1.0"