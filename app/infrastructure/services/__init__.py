"""
Application-scoped services.

Provides provider functions for shared infrastructure instances.
"""

from infrastructure.services.providers import (
    get_catalog,
    get_settings,
    reset_catalog,
)

__all__ = [
    "get_catalog",
    "get_settings",
    "reset_catalog",
]
