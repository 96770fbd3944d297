from storefront.database.async_db import (
    create_session_factory,
    create_tables,
    dispose_engine,
    get_async_db,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
)

__all__ = [
    "create_session_factory",
    "create_tables",
    "dispose_engine",
    "get_async_db",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
]
