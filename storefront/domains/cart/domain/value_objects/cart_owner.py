"""
Cart ownership

A cart belongs either to an authenticated user or to an anonymous session,
never both and never neither. The two cases are separate value objects so the
"exactly one" rule holds by construction.
"""

from dataclasses import dataclass
from typing import Union

from storefront.core.domain import ValueObject

from ..exceptions import InvalidCartOwnerException, InvalidSessionException, InvalidUserException


@dataclass(frozen=True)
class UserOwner(ValueObject):
    """Cart owned by an authenticated user."""

    user_id: str

    def _validate(self) -> None:
        if not self.user_id:
            raise InvalidUserException()


@dataclass(frozen=True)
class GuestOwner(ValueObject):
    """Cart owned by an anonymous session."""

    session_id: str

    def _validate(self) -> None:
        if not self.session_id:
            raise InvalidSessionException()


CartOwner = Union[UserOwner, GuestOwner]


def owner_from_identity(user_id: str | None, session_id: str | None) -> CartOwner:
    """
    Build the owner for a (user_id, session_id) pair.

    The user wins when both are given; persisted carts never carry both.
    """
    if user_id:
        return UserOwner(user_id=user_id)
    if session_id:
        return GuestOwner(session_id=session_id)
    raise InvalidCartOwnerException()
