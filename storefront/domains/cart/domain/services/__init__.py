"""
Cart Domain Services
"""

from storefront.domains.cart.domain.services.cart_validation_service import (
    CartItemValidation,
    CartValidation,
    CartValidationService,
    IssueType,
    ValidationIssue,
)

__all__ = [
    "CartValidationService",
    "CartValidation",
    "CartItemValidation",
    "ValidationIssue",
    "IssueType",
]
