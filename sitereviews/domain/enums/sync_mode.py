from __future__ import annotations
from enum import StrEnum


class SyncMode(StrEnum):
    gate = "gate"           # drop live events until the bulk read completes
    buffered = "buffered"   # hold live events until the bulk read completes, then merge
