"""Minimal HTTP demo service for exercising security-scanning pipelines."""

__version__ = "1.0.0"
