"""
Limit Store
===========
Thread-safe keyed collection holding one quota per bucket.
"""

import threading
from dataclasses import replace
from typing import Dict, Iterator, List, Mapping

import structlog

from .exceptions import LimitTypeNotFound
from .models import Limit, LimitType

logger = structlog.get_logger(__name__)

# Order used by snapshot_all()
BUCKET_ORDER = (
    LimitType.ABSOLUTE_MESSAGE,
    LimitType.ABSOLUTE_REGISTER,
    LimitType.AUTH_LOGIN,
    LimitType.AUTH_REGISTER,
    LimitType.IP,
    LimitType.GLOBAL,
    LimitType.ERROR,
    LimitType.GUILD,
    LimitType.WEBHOOK,
    LimitType.CHANNEL,
)


class LimitStore:
    """
    Quota records for all ten buckets of one session.

    Every operation holds a single lock for a short, non-blocking critical
    section, so a store can be shared by threads and asyncio tasks alike.
    Records handed out are copies; mutate through the store.

    Example:
        store = build_limits(config)

        if store.can_request(LimitType.CHANNEL):
            response = await send(...)
            store.apply_delta(LimitType.CHANNEL, -1)
    """

    def __init__(self, limits: Mapping[LimitType, Limit]):
        for bucket in BUCKET_ORDER:
            if bucket not in limits:
                raise LimitTypeNotFound(bucket)
        self._limits: Dict[LimitType, Limit] = {
            bucket: replace(limits[bucket]) for bucket in BUCKET_ORDER
        }
        self._lock = threading.Lock()

    def _record(self, bucket: LimitType) -> Limit:
        try:
            return self._limits[bucket]
        except KeyError:
            raise LimitTypeNotFound(bucket) from None

    def get(self, bucket: LimitType) -> Limit:
        """Current quota for a bucket."""
        with self._lock:
            return replace(self._record(bucket))

    def snapshot_all(self) -> List[Limit]:
        """Copies of every record, in BUCKET_ORDER."""
        with self._lock:
            return [replace(self._limits[bucket]) for bucket in BUCKET_ORDER]

    def set(self, bucket: LimitType, limit: Limit) -> None:
        """Replace the record for one bucket."""
        if limit.bucket != bucket:
            raise ValueError(f"Limit for '{limit.bucket}' cannot be stored under '{bucket}'")
        with self._lock:
            self._record(bucket)
            self._limits[bucket] = replace(limit)

    def apply_delta(self, bucket: LimitType, delta: int) -> Limit:
        """
        Add a signed amount to a bucket's remaining quota.

        Args:
            bucket: Bucket to change
            delta: Positive to replenish, negative to debit

        Returns:
            Copy of the updated record
        """
        with self._lock:
            record = self._record(bucket)
            was_available = record.remaining > 0
            record.add_remaining(delta)
            if was_available and record.exhausted:
                logger.debug("limit_exhausted", bucket=str(bucket), reset=record.reset)
            return replace(record)

    def reset_limit(self, bucket: LimitType) -> Limit:
        """Refill a bucket for a new window."""
        with self._lock:
            record = self._record(bucket)
            record.remaining = record.limit
            return replace(record)

    def can_request(self, bucket: LimitType) -> bool:
        with self._lock:
            return self._record(bucket).remaining > 0

    def copy(self) -> "LimitStore":
        """Independent store with the same records."""
        with self._lock:
            return LimitStore(self._limits)

    def __iter__(self) -> Iterator[Limit]:
        return iter(self.snapshot_all())

    def __len__(self) -> int:
        return len(self._limits)

    def __contains__(self, bucket: object) -> bool:
        return bucket in self._limits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimitStore):
            return NotImplemented
        return self.snapshot_all() == other.snapshot_all()

    def __repr__(self) -> str:
        return f"LimitStore({self.snapshot_all()!r})"


def apply_delta(store: LimitStore, bucket: LimitType, delta: int) -> Limit:
    """Functional form of LimitStore.apply_delta."""
    return store.apply_delta(bucket, delta)
