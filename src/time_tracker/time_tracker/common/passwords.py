from __future__ import annotations

from typing import Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import ValidationError


class PasswordScheme(Protocol):
    name: str

    def hash(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, stored: str | None, supplied: str) -> bool:
        raise NotImplementedError


class PlainTextPasswords:
    """Exact-match comparison on the stored value.

    Only acceptable for a local single-user setup; see ``WerkzeugPasswords``.
    """

    name = "plain"

    def hash(self, password: str) -> str:
        return password

    def verify(self, stored: str | None, supplied: str) -> bool:
        return stored is not None and stored == supplied


class WerkzeugPasswords:
    name = "werkzeug"

    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, stored: str | None, supplied: str) -> bool:
        if not stored:
            return False
        try:
            return check_password_hash(stored, supplied)
        except ValueError:
            # plaintext or corrupted values left over from the plain scheme
            return False


def get_password_scheme(name: str | None) -> PasswordScheme:
    key = (name or "plain").strip().lower()
    if key == "plain":
        return PlainTextPasswords()
    if key == "werkzeug":
        return WerkzeugPasswords()
    raise ValidationError(f"Unknown password scheme: {name!r}")
