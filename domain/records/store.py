"""In-memory record store: append, tag/type/recency recall, deletion, expiry."""
from __future__ import annotations

import time
from collections import Counter
from typing import Callable, List, Optional, Tuple

from core.logging import get_logger
from domain.errors import AllocationFailure, InvalidArgument, NotFound, require_text

from .models import INITIAL_CAPACITY, MAX_TAG_LENGTH, MAX_TEXT_LENGTH, Record, RecordType, StoreStats

log = get_logger("record_store")

Clock = Callable[[], float]


class RecordStore:
    """Growable ordered collection of records.

    Index order is insertion order. Deletion shifts later records down, so
    indices are not stable across deletions. ``capacity`` is the logical
    allocation: it doubles when a save finds the store full and never shrinks.

    Lookups return the stored record itself, so a caller sees its
    ``access_count`` move on subsequent recalls.
    """

    def __init__(
        self,
        initial_capacity: int = INITIAL_CAPACITY,
        *,
        max_capacity: Optional[int] = None,
        clock: Clock = time.time,
    ) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be positive")
        self._initial_capacity = initial_capacity
        self._max_capacity = max_capacity
        self._clock = clock
        self._records: List[Record] = []
        self._capacity = initial_capacity
        self._total_saved = 0
        self._total_recalled = 0
        log.info("store_initialized", capacity=self._capacity)

    # ---------- stats ----------

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def total_saved(self) -> int:
        return self._total_saved

    @property
    def total_recalled(self) -> int:
        return self._total_recalled

    def stats(self) -> StoreStats:
        by_type = Counter(r.type for r in self._records)
        return StoreStats(
            count=self.count,
            capacity=self._capacity,
            total_saved=self._total_saved,
            total_recalled=self._total_recalled,
            by_type={t: by_type[t] for t in RecordType if by_type[t]},
        )

    def records(self) -> Tuple[Record, ...]:
        """Current records in index order, without touching access counters."""
        return tuple(self._records)

    # ---------- writes ----------

    def _grow(self) -> None:
        new_capacity = self._capacity * 2 if self._capacity else self._initial_capacity
        if self._max_capacity is not None and new_capacity > self._max_capacity:
            raise AllocationFailure(f"cannot grow past {self._max_capacity} records")
        self._capacity = new_capacity
        log.info("store_resized", capacity=new_capacity)

    def save(self, text: str, tag: str, type: RecordType, importance: int = 0) -> bool:
        try:
            text = require_text(text, "text")
            tag = require_text(tag, "tag")
            try:
                rtype = RecordType(type)
                importance = int(importance)
            except (ValueError, TypeError) as exc:
                raise InvalidArgument(str(exc)) from exc
            if self.count >= self._capacity:
                self._grow()
        except InvalidArgument as exc:
            log.warning("record_save_rejected", reason=str(exc))
            return False
        except AllocationFailure as exc:
            log.error("record_save_failed", reason=str(exc), count=self.count, capacity=self._capacity)
            return False

        record = Record(
            text=text[:MAX_TEXT_LENGTH],
            tag=tag[:MAX_TAG_LENGTH],
            type=rtype,
            timestamp=self._clock(),
            importance=importance,
        )
        self._records.append(record)
        self._total_saved += 1
        log.debug("record_saved", type=record.type.label, tag=record.tag, preview=record.preview())
        return True

    def delete_by_tag(self, tag: str) -> bool:
        try:
            idx = self._index_of_tag(require_text(tag, "tag"))
        except (InvalidArgument, NotFound) as exc:
            log.info("record_delete_miss", tag=tag, reason=str(exc))
            return False
        del self._records[idx]
        log.debug("record_deleted", tag=tag, index=idx)
        return True

    def cleanup_old(self, max_age: float) -> int:
        """Drop every record strictly older than ``max_age`` seconds."""
        now = self._clock()
        survivors = [r for r in self._records if now - r.timestamp <= max_age]
        removed = len(self._records) - len(survivors)
        self._records = survivors
        if removed:
            log.info("records_expired", removed=removed, max_age=max_age)
        return removed

    def shutdown(self) -> None:
        log.info("store_shutdown", discarded=self.count)
        self._records = []
        self._capacity = 0
        self._total_saved = 0
        self._total_recalled = 0

    # ---------- reads ----------

    def _index_of_tag(self, tag: str) -> int:
        for i, record in enumerate(self._records):
            if record.tag == tag:
                return i
        raise NotFound(f"no record tagged {tag!r}")

    def _touch(self, record: Record) -> Record:
        record.access_count += 1
        self._total_recalled += 1
        return record

    def recall_by_tag(self, tag: str) -> Optional[Record]:
        try:
            idx = self._index_of_tag(require_text(tag, "tag"))
        except (InvalidArgument, NotFound) as exc:
            log.debug("record_recall_miss", tag=tag, reason=str(exc))
            return None
        record = self._touch(self._records[idx])
        log.debug("record_recalled", tag=tag, preview=record.preview())
        return record

    def recall_by_type(self, type: RecordType) -> Optional[Record]:
        """Most recent record of ``type``; equal timestamps go to the later insert."""
        try:
            type = RecordType(type)
        except ValueError:
            log.debug("record_recall_miss", type=type, reason="unknown record type")
            return None
        found: Optional[Record] = None
        for record in self._records:
            if record.type is type and (found is None or record.timestamp >= found.timestamp):
                found = record
        if found is None:
            log.debug("record_recall_miss", type=type.label)
            return None
        self._touch(found)
        log.debug("record_recalled", type=type.label, preview=found.preview())
        return found

    def recall_recent(self, n: int) -> List[Record]:
        if n <= 0 or not self._records:
            return []
        window = self._records[-n:]
        for record in window:
            record.access_count += 1
        self._total_recalled += len(window)
        log.debug("records_recalled_recent", requested=n, returned=len(window))
        return window
