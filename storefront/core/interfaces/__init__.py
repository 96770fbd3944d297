"""
Core Interfaces Module

This module provides the shared abstract interfaces (ports) for the application.
Following the Dependency Inversion Principle, high-level modules depend
on these abstractions rather than concrete implementations.
"""

from storefront.core.interfaces.cache import (
    CacheBackend,
    CacheConnectionError,
    CacheError,
    CacheSerializationError,
    ICache,
)

__all__ = [
    "ICache",
    "CacheBackend",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
]
