"""FastAPI dependency injection: provides the GalaxySession for the running app.

Sync routes run on a thread pool and the sector cache is not thread-safe, so
every route takes ``session_lock`` around session access.
"""

from __future__ import annotations

import threading

from procgen.session import GalaxySession

_session: GalaxySession | None = None
_lock = threading.Lock()


def set_session(session: GalaxySession | None) -> None:
    global _session
    _session = session


def get_session() -> GalaxySession:
    if _session is None:
        raise RuntimeError("GalaxySession not initialized, server not started correctly.")
    return _session


def session_lock() -> threading.Lock:
    return _lock
