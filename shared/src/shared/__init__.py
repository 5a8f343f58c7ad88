"""
Shared utilities for Relais services.
"""
