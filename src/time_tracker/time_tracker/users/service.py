from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..common.passwords import PasswordScheme, PlainTextPasswords
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..storage.snapshot import SessionPointer
from ..tasks.repository import TaskRepository
from ..timelogs.repository import TimeLogRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

Transaction = Callable[[], AbstractContextManager]


class AuthService:
    """Use case: login / logout / who is logged in.

    The session pointer is the only state this service writes; it never
    touches the entity snapshot.

    The pointer is the single-client "who is logged in" value of a local,
    one-browser setup. Over HTTP it is one global value shared by every
    client: any logout clears it for all of them. The web layer identifies
    callers by the Flask session instead and never reads it.
    """

    def __init__(
        self,
        users: UserRepository,
        session: SessionPointer,
        *,
        passwords: Optional[PasswordScheme] = None,
    ):
        self._users = users
        self._session = session
        self._passwords = passwords or PlainTextPasswords()

    def login(self, email: str, password: str) -> Optional[User]:
        user = next(
            (
                u
                for u in self._users.list_all()
                if u.email == email and self._passwords.verify(u.password, password)
            ),
            None,
        )
        if not user:
            logger.info("Failed login for %s", email)
            return None
        self._session.set(user.user_id)
        return user

    def logout(self) -> None:
        self._session.clear()

    def get_logged_in_user(self) -> Optional[User]:
        user_id = self._session.get()
        if not user_id:
            return None
        return self._users.get_by_id(user_id)


class UserService:
    """Use case: manage members (admin) and the own profile (everyone)."""

    def __init__(
        self,
        users: UserRepository,
        tasks: TaskRepository,
        time_logs: TimeLogRepository,
        *,
        transaction: Transaction,
        passwords: Optional[PasswordScheme] = None,
    ):
        self._users = users
        self._tasks = tasks
        self._time_logs = time_logs
        self._transaction = transaction
        self._passwords = passwords or PlainTextPasswords()

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def add_member(self, member: User) -> User:
        """Create a user; ``member.user_id`` is ignored and a new id assigned."""
        name = require_non_empty(member.name, "Name")
        email = require_non_empty(member.email, "Email")
        password = self._passwords.hash(member.password) if member.password else None
        return self._users.create(replace(member, name=name, email=email, password=password))

    def update_member(self, member: User) -> Optional[User]:
        """Full replace, except that a missing/empty password keeps the stored one.

        Returns None for an unknown id, or when the change would demote the
        last Admin.
        """
        with self._transaction():
            existing = self._users.get_by_id(member.user_id)
            if not existing:
                return None
            password = self._passwords.hash(member.password) if member.password else existing.password
            updated = replace(member, password=password)
            if self._demotes_last_admin(existing, updated):
                return None
            self._users.update(updated)
            return updated

    def update_profile(self, profile: User) -> Optional[User]:
        """Self-service update of the own contact details.

        Role and password always keep their stored values on this path; only
        an admin can change a role, through ``update_member``.
        """
        with self._transaction():
            existing = self._users.get_by_id(profile.user_id)
            if not existing:
                return None
            updated = replace(profile, role=existing.role, password=existing.password)
            self._users.update(updated)
            return updated

    def _demotes_last_admin(self, existing: User, updated: User) -> bool:
        if existing.role != Role.ADMIN or updated.role == Role.ADMIN:
            return False
        if len(self._users.list_admins()) > 1:
            return False
        logger.warning("Refused to change role of %s: cannot demote the last admin", existing.user_id)
        return True

    def delete_member(self, user_id: str) -> bool:
        """Delete a user, reassigning their tasks and dropping their time logs.

        Returns False (and changes nothing) for an unknown id or when the user
        is the last remaining Admin.
        """
        with self._transaction():
            user = self._users.get_by_id(user_id)
            if not user:
                return False

            if user.role == Role.ADMIN and len(self._users.list_admins()) <= 1:
                logger.warning("Refused to delete %s: cannot delete the last admin", user_id)
                return False

            self._users.delete_by_id(user_id)

            admins = self._users.list_admins()
            heir = admins[0].user_id if admins else ""
            moved = self._tasks.reassign(from_user_id=user_id, to_user_id=heir)
            removed = self._time_logs.delete_for_user(user_id)

        logger.info(
            "Deleted user %s (tasks reassigned to %r: %d, time logs removed: %d)",
            user_id, heir, moved, removed,
        )
        return True
