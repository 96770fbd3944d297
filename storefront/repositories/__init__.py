from .async_redis_cache import AsyncRedisCache

__all__ = ["AsyncRedisCache"]
