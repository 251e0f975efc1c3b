"""Analyze and browse author contributions across git repositories."""

__version__ = "0.1.0"