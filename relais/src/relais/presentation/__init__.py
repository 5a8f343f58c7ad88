"""
Presentation layer for Relais.
"""
