"""Diffie-Hellman key pair generator."""

__version__ = "0.1.0"
