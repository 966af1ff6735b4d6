"""
Domain layer for Adresse.
"""
