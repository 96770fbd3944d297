from storefront.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_logger,
    get_repository_logger,
)

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_repository_logger",
]
