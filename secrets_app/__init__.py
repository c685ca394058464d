"""Secrets: accounts with a single protected secret, local and Google sign-in."""

__version__ = "1.0.0"
