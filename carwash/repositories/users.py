"""
User repository.
"""
from typing import Optional

from sqlalchemy import select

from carwash.exceptions import Conflict
from carwash.models import User
from carwash.repositories.base import Repository

DUPLICATE_USERNAME = "Username already exists"


class UserRepository(Repository):

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def create(self, username: str, password_hash: str) -> User:
        if await self.get_by_username(username) is not None:
            raise Conflict(DUPLICATE_USERNAME)

        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        await self._commit(DUPLICATE_USERNAME)
        return user
