# sitereviews/common/naming/push_keys.py
from __future__ import annotations

import secrets
import threading
import time

# Ordered by ASCII value so generated keys sort chronologically as plain strings.
PUSH_ALPHABET = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"

_TIME_CHARS = 8
_RANDOM_CHARS = 12


class PushKeyGenerator:
    """
    Generates 20-char, chronologically sortable record keys:
      - 8 chars encode the millisecond timestamp (base64, sortable alphabet)
      - 12 chars of randomness

    Two keys generated in the same millisecond reuse the previous random tail
    incremented by one, so keys stay strictly increasing within a process.
    """

    def __init__(self) -> None:
        self._last_ms = -1
        self._last_rand: list[int] = [0] * _RANDOM_CHARS
        self._lock = threading.Lock()

    def __call__(self, now_ms: int | None = None) -> str:
        ms = int(time.time() * 1000) if now_ms is None else int(now_ms)
        with self._lock:
            if ms == self._last_ms:
                self._increment()
            else:
                self._last_rand = [secrets.randbelow(64) for _ in range(_RANDOM_CHARS)]
            self._last_ms = ms
            rand = list(self._last_rand)

        head = []
        for _ in range(_TIME_CHARS):
            head.append(PUSH_ALPHABET[ms % 64])
            ms //= 64
        return "".join(reversed(head)) + "".join(PUSH_ALPHABET[i] for i in rand)

    def _increment(self) -> None:
        i = _RANDOM_CHARS - 1
        while i >= 0 and self._last_rand[i] == 63:
            self._last_rand[i] = 0
            i -= 1
        if i >= 0:
            self._last_rand[i] += 1


push_key = PushKeyGenerator()
