"""
Infrastructure layer for Adresse.
"""
