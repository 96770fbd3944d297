"""
Interfaces para sistemas de caché

Define contratos para almacenamiento en caché (Redis, in-memory, etc.)
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, List, Optional, Protocol, runtime_checkable


class CacheBackend(str, Enum):
    """Backends de caché soportados"""

    REDIS = "redis"
    IN_MEMORY = "in_memory"


@runtime_checkable
class ICache(Protocol):
    """
    Interface base para sistemas de caché.

    La caché es un canal auxiliar de mejor esfuerzo: las implementaciones
    nunca propagan fallos del backend. Una lectura fallida es un "miss" y una
    escritura fallida devuelve False.

    Example:
        ```python
        cart = await cache.get("cart:123")
        if cart is None:
            cart = await repository.get_cart_with_items(cart_id="123")
            await cache.set("cart:123", cart, ttl=300)
        ```
    """

    @property
    @abstractmethod
    def backend(self) -> CacheBackend:
        """Tipo de backend de caché"""
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Obtiene valor del caché.

        Args:
            key: Clave a buscar

        Returns:
            Valor cacheado o None si no existe/expiró/el backend no responde
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Guarda valor en caché.

        Args:
            key: Clave
            value: Valor a cachear (debe ser serializable a JSON)
            ttl: Time-to-live en segundos (None = sin expiración)

        Returns:
            True si se guardó exitosamente
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Elimina entrada de caché.

        Args:
            key: Clave a eliminar

        Returns:
            True si se eliminó, False si no existía
        """
        ...

    @abstractmethod
    async def delete_many(self, keys: List[str]) -> int:
        """
        Elimina múltiples claves.

        Args:
            keys: Lista de claves a eliminar

        Returns:
            Número de claves eliminadas
        """
        ...


# Excepciones
class CacheError(Exception):
    """Error base para caché"""

    pass


class CacheConnectionError(CacheError):
    """Error de conexión con backend"""

    pass


class CacheSerializationError(CacheError):
    """Error serializando/deserializando valor"""

    pass
