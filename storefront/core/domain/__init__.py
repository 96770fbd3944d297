"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Events: Domain events recorded by aggregates
- Exceptions: Domain-specific error handling
"""

from storefront.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid_str,
)
from storefront.core.domain.events import DomainEvent
from storefront.core.domain.exceptions import (
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    ValidationException,
)
from storefront.core.domain.value_objects import (
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid_str",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Events
    "DomainEvent",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InsufficientStockException",
]
