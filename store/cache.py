"""
Result cache with per-entry expiry on top of the key-value store. Entries are JSON envelopes carrying their creation and expiry times; expired or unreadable entries are evicted on read and reported as misses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from store import client
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    payload: Any
    created_at: float
    expires_at: float

    def expired(self, at_ms: float) -> bool:
        return at_ms > self.expires_at


def _to_json(entry: CacheEntry) -> str:
    return json.dumps({
        "key": entry.key,
        "payload": entry.payload,
        "created_at": entry.created_at,
        "expires_at": entry.expires_at,
    })


def _from_json(data: str) -> CacheEntry:
    d = json.loads(data)
    return CacheEntry(
        key=d["key"],
        payload=d["payload"],
        created_at=float(d["created_at"]),
        expires_at=float(d["expires_at"]),
    )


class ResultCache:
    def __init__(self, default_ttl_ms: int | None = None, scan_pattern: str = "*") -> None:
        self.default_ttl_ms = default_ttl_ms if default_ttl_ms is not None else settings.api_cache_ttl_ms
        self.scan_pattern = scan_pattern

    async def _read(self, key: str) -> tuple[Optional[str], Optional[CacheEntry]]:
        raw = await client.redis_get(key)
        if raw is None:
            return None, None
        try:
            return raw, _from_json(raw)
        except (ValueError, KeyError, TypeError) as exc:
            log.debug("Corrupt cache entry %s: %s", key, exc)
            return raw, None

    async def get(self, key: str) -> Optional[Any]:
        try:
            raw, entry = await self._read(key)
            if raw is None:
                return None
            if entry is None or entry.expired(client.now_ms()):
                await self.delete(key)
                return None
            return entry.payload
        except Exception as exc:
            log.debug("Cache get failed %s: %s", key, exc)
            return None

    async def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        ttl = int(ttl_ms if ttl_ms is not None else self.default_ttl_ms)
        created = client.now_ms()
        entry = CacheEntry(key=key, payload=value, created_at=created, expires_at=created + ttl)
        try:
            await client.redis_set(key, _to_json(entry), ttl_ms=ttl)
        except Exception as exc:
            log.debug("Cache set failed %s: %s", key, exc)

    async def delete(self, key: str) -> None:
        try:
            await client.redis_delete(key)
        except Exception as exc:
            log.debug("Cache delete failed %s: %s", key, exc)

    async def cleanup(self) -> int:
        removed = 0
        now = client.now_ms()
        for key in await client.redis_scan(self.scan_pattern):
            raw, entry = await self._read(key)
            if raw is None:
                continue
            if entry is None or entry.expired(now):
                await self.delete(key)
                removed += 1
        if removed:
            log.info("Cleaned up %d expired cache entries", removed)
        return removed

    async def stats(self) -> Dict[str, int]:
        total = active = expired = size = 0
        now = client.now_ms()
        for key in await client.redis_scan(self.scan_pattern):
            raw, entry = await self._read(key)
            if raw is None:
                continue
            total += 1
            size += len(raw)
            if entry is None or entry.expired(now):
                expired += 1
            else:
                active += 1
        return {
            "total_entries": total,
            "active_entries": active,
            "expired_entries": expired,
            "total_size": size,
        }
