"""Bearer-token storage shared by request signing, auth and the watchdog.

The token is the only shared mutable state in the client. It is written
by login/logout and read everywhere else. Stores are passed in
explicitly instead of being looked up globally.
"""

import json
import logging
import os
import re
import tempfile
import time
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000


@dataclass
class StoredSession:
    token: str
    expires_in: str = "1d"
    expires_at: int | None = None  # epoch milliseconds


def expiry_from(expires_in: str | int | None, now_ms: int | None = None) -> int:
    """Estimate the expiry timestamp from the backend's ``expiresIn``.

    ``7d`` style values are days and a bare number is seconds; any other
    unit counts as one day.
    """
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    text = str(expires_in).strip() if expires_in else ""
    if text.isdigit():
        return now_ms + int(text) * 1000
    match = re.match(r"^(\d+)\s*d", text)
    days = int(match.group(1)) if match else 1
    return now_ms + days * DAY_MS


class SessionStore:
    """Holds the current session; subclasses decide where it lives."""

    def load(self) -> StoredSession | None:
        raise NotImplementedError

    def save(self, token: str, expires_in: str = "1d") -> StoredSession:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def get_token(self) -> str | None:
        session = self.load()
        return session.token if session else None


class MemorySessionStore(SessionStore):
    def __init__(self, token: str | None = None):
        self._session = StoredSession(token=token) if token else None

    def load(self) -> StoredSession | None:
        return self._session

    def save(self, token: str, expires_in: str = "1d") -> StoredSession:
        self._session = StoredSession(token=token, expires_in=expires_in, expires_at=expiry_from(expires_in))
        return self._session

    def clear(self) -> None:
        self._session = None


class FileSessionStore(SessionStore):
    """Durable storage: a small JSON file readable only by the current user."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def load(self) -> StoredSession | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return StoredSession(**data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

    def save(self, token: str, expires_in: str = "1d") -> StoredSession:
        session = StoredSession(token=token, expires_in=expires_in, expires_at=expiry_from(expires_in))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # mkstemp creates the file as 0600; the token is never world-readable.
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(asdict(session), fh)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return session

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
