"""
Decode-event logging.

Decoders log short snake_case event names (``packet_decoded``,
``decode_failed``...) with a ``details`` dict attached through ``extra``.
``RingBufferHandler`` keeps the most recent events in memory so a caller
can inspect recent decoder activity without configuring log output.
"""
import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

IDENTITY_KEYS = frozenset({"identity", "imei"})
_VISIBLE_SUFFIX = 4


class RingBufferHandler(logging.Handler):
    """Keeps the last ``max_entries`` decode events as plain dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._ring: Deque[Dict[str, Any]] = deque(maxlen=max_entries)
        self._guard = threading.Lock()

    @staticmethod
    def _to_event(record: logging.LogRecord) -> Dict[str, Any]:
        return {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": dict(getattr(record, "details", None) or {}),
        }

    def emit(self, record: logging.LogRecord) -> None:
        event = self._to_event(record)
        with self._guard:
            self._ring.append(event)

    def get_events(self, event: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return buffered events oldest first, optionally only those named ``event``."""
        with self._guard:
            snapshot = list(self._ring)
        if event is None:
            return snapshot
        return [e for e in snapshot if e["event"] == event]

    def clear(self) -> None:
        with self._guard:
            self._ring.clear()


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    return next((h for h in logger.handlers if isinstance(h, RingBufferHandler)), None)


def create_logger(name: str, ring_size: int, level: str | int = logging.INFO) -> logging.Logger:
    """
    Return the logger ``name`` with a ring buffer attached.

    Calling it again for the same name returns the logger unchanged, keeping
    its existing buffer.
    """
    logger = logging.getLogger(name)
    if ring_buffer(logger) is not None:
        return logger
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def _mask(value: Any) -> str:
    if isinstance(value, str) and len(value) > _VISIBLE_SUFFIX:
        return "***" + value[-_VISIBLE_SUFFIX:]
    return "***"


def redact(details: Optional[dict]) -> dict:
    """Mask device identifiers in ``details``, keeping their last four characters."""
    if not details:
        return {}
    return {key: _mask(value) if key in IDENTITY_KEYS else value for key, value in details.items()}
