"""
Application layer for Relais.
"""
