"""
HTTP and WebSocket API for Relais.
"""
