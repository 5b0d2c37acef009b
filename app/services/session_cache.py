"""Client-side session cache — token plus the display projection of the user.

Stored as a small JSON document under a fixed key, so a client (CLI,
desktop shell, test harness) can restore the session at start-up. The
cache never holds the password or its hash; the server re-validates the
token on every request, so a stale projection only affects display.
"""
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from app.core.logging import get_logger

logger = get_logger(__name__)

SESSION_KEY = "user"


class SessionCache:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Session cache unreadable, starting signed out: %s", str(e))
            return {}

    def _write(self, document: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(document, ensure_ascii=False, default=str), encoding="utf-8")
        # atomic on the same filesystem
        tmp.replace(self.path)

    def load(self) -> Optional[Dict[str, Any]]:
        """Return ``{"access_token": ..., "user": {...}}`` or None when signed out."""
        session = self._read().get(SESSION_KEY)
        if not isinstance(session, dict) or not session.get("access_token"):
            return None
        return session

    def store(self, access_token: str, user: Dict[str, Any]) -> Dict[str, Any]:
        session = {"access_token": access_token, "user": dict(user)}
        document = self._read()
        document[SESSION_KEY] = session
        self._write(document)
        return session

    def merge_user(self, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Refresh the cached projection after a profile update; no-op when signed out."""
        session = self.load()
        if session is None:
            return None
        session["user"].update(fields)
        return self.store(session["access_token"], session["user"])

    def clear(self) -> None:
        document = self._read()
        if document.pop(SESSION_KEY, None) is not None:
            self._write(document)
