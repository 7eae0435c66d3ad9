from __future__ import annotations

from typing import Optional

from flask import has_request_context, session

from .kv_store import JsonKeyValueStore, StorageError


class FlaskSessionStore(JsonKeyValueStore):
    """Key-value medium backed by the signed Flask session cookie.

    Holds per-browser values such as the logged-in user, so each client gets
    its own session instead of sharing one process-wide entry.
    """

    def _require_session(self):
        if not has_request_context():
            raise StorageError("no active request")
        return session

    def _read(self, key: str) -> Optional[str]:
        value = self._require_session().get(key)
        return value if isinstance(value, str) else None

    def _write(self, key: str, raw: str) -> None:
        self._require_session()[key] = raw

    def _delete(self, key: str) -> None:
        self._require_session().pop(key, None)

    def _clear(self) -> None:
        self._require_session().clear()
