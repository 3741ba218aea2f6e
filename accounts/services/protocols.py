from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from accounts.models import User


class UserStore(Protocol):
    async def find_one(self, user_id: int, relations: Iterable[str] = ()) -> Optional[User]: ...

    async def find_one_by(self, **filters: Any) -> Optional[User]: ...

    async def find(self, where: Optional[Mapping[str, Any]] = None, limit: Optional[int] = None) -> List[User]: ...

    async def save(self, user: User) -> User: ...

    async def update(self, user_id: int, values: Dict[str, Any]) -> int: ...

    async def delete(self, user_id: int) -> int: ...
