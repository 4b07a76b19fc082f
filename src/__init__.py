"""Combo Generator Backend - practice combo API.

This package provides a hexagonal architecture implementation around the
``combo`` engine.

Layers:
- domain: Saved combo entities and value objects
- application: Use cases and port interfaces
- infrastructure: Adapters for storage
- api: REST endpoints
"""

__version__ = "1.0.0"
