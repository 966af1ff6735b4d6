"""
Shared utilities for Adresse tools: reporting and test base classes.
"""
