"""
Slug Value Object

URL-friendly identifier used by catalog collaborators (product and category
lookups by slug).
"""

import re
from dataclasses import dataclass

from storefront.core.domain import ValueObject

from ..exceptions import InvalidSlugException


@dataclass(frozen=True)
class Slug(ValueObject):
    """
    Slug value object.

    Only lowercase letters, digits, hyphens and underscores are accepted.

    Example:
        ```python
        slug = Slug(value="t-shirt_basic")
        Slug.from_text("Classic Tee 2024")  # Slug(value="classic-tee-2024")
        ```
    """

    value: str

    SLUG_PATTERN = re.compile(r"^[a-z0-9-_]+$")

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.SLUG_PATTERN.match(self.value):
            raise InvalidSlugException(str(self.value))

    @classmethod
    def from_text(cls, text: str) -> "Slug":
        """Build a slug from free text (lowercase, runs of other chars become '-')."""
        normalized = re.sub(r"[^a-z0-9_]+", "-", text.strip().lower()).strip("-")
        return cls(value=normalized)

    def __str__(self) -> str:
        return self.value
