"""
Infrastructure layer for Relais.

Provides:
- In-memory channel registry and metadata store
- WebSocket transport adapter
- Health checks
"""
