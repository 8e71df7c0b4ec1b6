from __future__ import annotations

from typing import Optional, Protocol


class Storage(Protocol):
    """Key-value string storage (the shape of browser ``localStorage``).

    Lưu ý (DIP): the store and the auth service depend on this interface,
    never on a concrete backend. Adapters raise ``PersistenceError`` when the
    backend cannot be read or written.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
