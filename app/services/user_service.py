from typing import Any, Dict, Optional

from app.core.errors import ValidationFailure
from app.models.user import User


async def get_user(user_id: int) -> Optional[User]:
    return await User.get_or_none(id=user_id)


async def get_user_by_username(username: str) -> Optional[User]:
    return await User.get_or_none(username=username)


async def create_user(data: Dict[str, Any]) -> User:
    """Stores the user as given. Hashing the password is the caller's job."""
    if await User.filter(username=data["username"]).exists():
        raise ValidationFailure("Username already exists", field="username")
    return await User.create(**data)
