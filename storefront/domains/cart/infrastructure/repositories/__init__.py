"""
Cart Infrastructure Repositories
"""

from .cart_repository import SQLAlchemyCartRepository

__all__ = ["SQLAlchemyCartRepository"]
