"""
Domain layer for Relais.
"""
