"""
Application layer for Adresse.
"""
