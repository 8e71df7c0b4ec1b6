from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import USER_ID_PREFIX
from ..core.enums import Role
from ..store.store import DataStore
from .model import User
from .repository import UserRepository


class StoreUserRepository(UserRepository):
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[User]:
        with self._store.reading() as state:
            return list(state.users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._store.reading() as state:
            return next((u for u in state.users if u.user_id == user_id), None)

    def list_admins(self) -> Sequence[User]:
        with self._store.reading() as state:
            return [u for u in state.users if u.role == Role.ADMIN]

    def create(self, user: User) -> User:
        with self._store.transaction() as state:
            stored = replace(user, user_id=self._store.new_id(USER_ID_PREFIX))
            state.users.append(stored)
            return stored

    def update(self, user: User) -> bool:
        with self._store.transaction() as state:
            for i, existing in enumerate(state.users):
                if existing.user_id == user.user_id:
                    state.users[i] = user
                    return True
            return False

    def delete_by_id(self, user_id: str) -> bool:
        with self._store.transaction() as state:
            remaining = [u for u in state.users if u.user_id != user_id]
            if len(remaining) == len(state.users):
                return False
            state.users = remaining
            return True
