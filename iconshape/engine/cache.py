"""Adaptive scale cache: one write-once result shared by every normalizer.

All icons using the device-wide adaptive mask share a silhouette, so their
scale is computed once per process and reused. The mask is assumed not to
change while the process runs.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from iconshape.engine.context import CachedScale

logger = logging.getLogger(__name__)


class AdaptiveScaleCache:
    """Compute-once holder for the adaptive mask's scale and bounds."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entry: CachedScale | None = None

    def peek(self) -> CachedScale | None:
        return self._entry

    def get_or_compute(self, compute: Callable[[], CachedScale]) -> CachedScale:
        """Return the cached entry, running ``compute`` only if nothing is cached yet.

        Concurrent callers block until the first computation finishes and
        all observe the same entry.
        """
        entry = self._entry
        if entry is not None:
            return entry

        with self._lock:
            if self._entry is None:
                entry = compute()
                self._entry = entry
                logger.info("Adaptive icon scale cached: %.4f", entry.scale)
            return self._entry
