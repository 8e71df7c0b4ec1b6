from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Thực thể miền (domain): User.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập storage).
    ``password`` is write-only: it is persisted but never serialised back out
    through the HTTP layer.
    """

    user_id: str
    name: str
    email: str
    role: Role
    avatar_url: str = ""
    password: Optional[str] = None
    designation: Optional[str] = None
    work_phone: Optional[str] = None
    personal_mobile: Optional[str] = None
    department: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
