"""
Per-client fixed-window rate limiter.

Request timestamps are kept per key (client IP) in a small JSON file so the
counters survive restarts. Every check is a read-modify-write of that file
and runs under a single lock.
"""
import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from leadcapture.config import settings

logger = logging.getLogger(__name__)


class RateLimiter:
    """Fixed-window-by-pruning counter keyed by client address."""

    def __init__(
        self,
        max_requests: int = 100,
        window: int = 900,
        storage_path: str = "storage/rate_limits.json",
        clock: Callable[[], float] = time.time
    ):
        self.max_requests = max_requests
        self.window = window
        self.storage_path = Path(storage_path)
        self.clock = clock
        self._lock = threading.Lock()

        self.storage_path.parent.mkdir(parents=True, exist_ok=True)

    def check_limit(self, key: str) -> bool:
        """
        Record a request for key if it is within the limit.

        Returns:
            True when the request is allowed (and recorded),
            False when the key already used its quota in the current window.
        """
        with self._lock:
            now = self.clock()
            limits = self._clean_old_entries(self._load(), now)

            timestamps = limits.get(key, [])
            if len(timestamps) >= self.max_requests:
                # Persist the cleanup even on denial
                self._save(limits)
                return False

            timestamps.append(now)
            limits[key] = timestamps
            self._save(limits)
            return True

    def remaining(self, key: str) -> int:
        """Requests left for key in the current window."""
        with self._lock:
            now = self.clock()
            count = len(self._in_window(self._load().get(key, []), now))
        return max(0, self.max_requests - count)

    def reset_after(self, key: str) -> int:
        """Seconds until the oldest in-window request for key expires."""
        with self._lock:
            now = self.clock()
            timestamps = self._in_window(self._load().get(key, []), now)
        if not timestamps:
            return 0
        return max(0, int(round(min(timestamps) + self.window - now)))

    def _in_window(self, timestamps: List[float], now: float) -> List[float]:
        return [ts for ts in timestamps if now - ts < self.window]

    def _clean_old_entries(self, limits: Dict[str, List[float]], now: float) -> Dict[str, List[float]]:
        cleaned = {}
        for ip, timestamps in limits.items():
            recent = self._in_window(timestamps, now)
            if recent:
                cleaned[ip] = recent
        return cleaned

    def _load(self) -> Dict[str, List[float]]:
        if not self.storage_path.exists():
            return {}
        try:
            content = json.loads(self.storage_path.read_text() or "{}")
        except (OSError, ValueError) as e:
            logger.warning(f"Rate limit store unreadable, starting fresh: {e}")
            return {}
        if not isinstance(content, dict):
            return {}
        return {
            str(ip): [float(ts) for ts in timestamps]
            for ip, timestamps in content.items()
            if isinstance(timestamps, list)
        }

    def _save(self, limits: Dict[str, List[float]]) -> None:
        # Write to a sibling temp file then swap it in
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.storage_path.parent),
            prefix=".rate_limits.",
            suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w") as fh:
                json.dump(limits, fh)
            os.replace(tmp_path, self.storage_path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


# =============================================================================
# RATE LIMITER SINGLETON
# =============================================================================

_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get the rate limiter instance."""
    global _rate_limiter

    if _rate_limiter is None:
        _rate_limiter = RateLimiter(
            max_requests=settings.RATE_LIMIT_REQUESTS,
            window=settings.RATE_LIMIT_WINDOW,
            storage_path=settings.RATE_LIMIT_STORAGE_PATH,
        )

    return _rate_limiter


def set_rate_limiter(limiter: Optional[RateLimiter]) -> None:
    """Set custom rate limiter (for testing)."""
    global _rate_limiter
    _rate_limiter = limiter
