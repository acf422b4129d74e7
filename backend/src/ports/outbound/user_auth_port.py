"""Port for verifying identity tokens issued by the auth provider."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from backend.src.core.entities.user import User


@runtime_checkable
class UserAuthPort(Protocol):
    async def verify_token(self, id_token: str) -> Optional[User]: ...
    async def get_user_by_uid(self, uid: str) -> Optional[User]: ...
